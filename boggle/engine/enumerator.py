"""Automated opponent: every lexicon word present on a grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Set

from ..core.constants import NEIGHBOR_STEPS, NON_LETTER
from ..utils.logger import get_logger
from .locator import is_on_board

if TYPE_CHECKING:
    from ..data.lexicon import Lexicon
    from .grid import LetterGrid


LOGGER = get_logger(__name__)


class BoardWordEnumerator:
    """Collects the lexicon words that can be traced on a grid.

    The default strategy tests each lexicon entry with the word locator.
    ``prune_prefixes`` switches to a board walk that abandons any path whose
    letters start no lexicon word; both strategies return the same set.
    """

    def __init__(self, lexicon: "Lexicon", prune_prefixes: bool = False) -> None:
        self.lexicon = lexicon
        self.prune_prefixes = prune_prefixes

    def find_all(self, grid: "LetterGrid") -> Set[str]:
        if self.prune_prefixes:
            found = self._walk_board(grid)
        else:
            found = {word for word in self.lexicon if is_on_board(grid, word)}
        LOGGER.debug(
            "Found %d of %d lexicon words on %s", len(found), len(self.lexicon), grid.as_string()
        )
        return found

    def _walk_board(self, grid: "LetterGrid") -> Set[str]:
        found: Set[str] = set()
        grid.un_use_all()
        for row, col in grid.cells():
            self._extend(grid, row, col, [], found)
        return found

    def _extend(
        self,
        grid: "LetterGrid",
        row: int,
        col: int,
        prefix: List[str],
        found: Set[str],
    ) -> None:
        with grid.claim(row, col) as letter:
            if letter == NON_LETTER:
                return
            prefix.append(letter)
            try:
                candidate = "".join(prefix)
                if not self.lexicon.has_prefix(candidate):
                    return
                if self.lexicon.contains(candidate):
                    found.add(candidate)
                for dr, dc in NEIGHBOR_STEPS:
                    self._extend(grid, row + dr, col + dc, prefix, found)
            finally:
                prefix.pop()


def find_all_words(grid: "LetterGrid", lexicon: "Lexicon") -> Set[str]:
    return BoardWordEnumerator(lexicon).find_all(grid)


__all__ = ["BoardWordEnumerator", "find_all_words"]
