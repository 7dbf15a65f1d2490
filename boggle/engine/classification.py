"""Partition a round's words by who found them and whether they are real."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Set

from ..core.models import WordClassification
from ..data.normalization import normalize_word
from .locator import is_on_board

if TYPE_CHECKING:
    from .grid import LetterGrid


def _normalized(words: Iterable[str]) -> Set[str]:
    return {w for w in (normalize_word(word) for word in words) if w}


def classify_words(
    grid: "LetterGrid",
    human_words: Iterable[str],
    computer_words: Iterable[str],
) -> WordClassification:
    """Split both word sets against ``grid``.

    Human words that cannot be traced on the grid are ``invalid``. The valid
    human words shared with the computer are ``common``; what is left on each
    side is ``human_only`` / ``computer_only``. Computer words are assumed to
    come from the enumerator and are not re-checked.
    """

    human = _normalized(human_words)
    computer = _normalized(computer_words)

    invalid = {word for word in human if not is_on_board(grid, word)}
    valid = human - invalid
    common = valid & computer
    return WordClassification(
        common=common,
        human_only=valid - common,
        computer_only=computer - common,
        invalid=invalid,
    )


__all__ = ["classify_words"]
