"""Sorted lexicon with probabilistic learning and threshold persistence."""

from __future__ import annotations

import bisect
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from ..core.constants import (
    MAX_DIFFICULTY,
    MAX_SAVE_SAMPLE,
    MIN_DIFFICULTY,
    SAVE_THRESHOLD,
    LoadStatus,
)
from ..core.exceptions import LexiconLoadError, LexiconSaveError
from ..core.models import LoadResult
from ..utils.logger import get_logger
from .normalization import fold_case, normalize_word
from .sources import (
    DEFAULT_TIMEOUT_SECONDS,
    WordSource,
    describe_source,
    is_url,
    read_word_source,
    write_word_list,
)


LOGGER = get_logger(__name__)


@dataclass
class LexiconConfig:
    """Configuration for lexicon loading, learning and persistence."""

    path: Path | str | None = None
    save_path: Path | str | None = None
    save_threshold: int = SAVE_THRESHOLD
    autosave: bool = True
    sample_size: Optional[int] = None
    rng: Optional[random.Random] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if self.save_threshold < 1:
            raise ValueError(f"save_threshold must be at least 1, got {self.save_threshold}")
        if self.sample_size is not None and self.sample_size < 1:
            raise ValueError(f"sample_size must be at least 1, got {self.sample_size}")


def check_difficulty(difficulty: int) -> int:
    if not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise ValueError(
            f"difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}, got {difficulty}"
        )
    return difficulty


class Lexicon:
    """Always-sorted, duplicate-free collection of lower-case words.

    Membership and prefix tests are binary searches over the sorted list.
    ``learn`` and ``forget`` mutate the list in place and keep it sorted, so
    callers must not interleave them with queries from another thread.
    """

    def __init__(
        self,
        words: Iterable[str] = (),
        config: Optional[LexiconConfig] = None,
    ) -> None:
        self.config = config or LexiconConfig()
        self._rng = self.config.rng or random.Random()
        self._words: List[str] = []
        self._size_when_saved = 0
        self.last_load: Optional[LoadResult] = None
        self._replace(words)

    @classmethod
    def from_source(
        cls,
        source: Optional[WordSource] = None,
        config: Optional[LexiconConfig] = None,
    ) -> "Lexicon":
        """Build a lexicon from ``source`` (or ``config.path``), best effort.

        A source that cannot be read leaves the lexicon empty; inspect
        :attr:`last_load` to tell the two outcomes apart.
        """

        lexicon = cls(config=config)
        source = source if source is not None else lexicon.config.path
        if source is not None:
            lexicon.bulk_load(source)
        return lexicon

    # ------------------------------------------------------------------
    # Loading & persistence
    # ------------------------------------------------------------------
    def bulk_load(self, source: WordSource) -> LoadResult:
        label = describe_source(source)
        try:
            lines = read_word_source(source, timeout_seconds=self.config.timeout_seconds)
        except LexiconLoadError as exc:
            LOGGER.warning("Lexicon load failed, starting empty: %s", exc)
            self._replace(())
            self.last_load = LoadResult(LoadStatus.FAILED, 0, label, str(exc))
            return self.last_load

        self._replace(lines)
        LOGGER.info("Loaded %d words from %s", len(self._words), label)
        self.last_load = LoadResult(LoadStatus.LOADED, len(self._words), label)
        return self.last_load

    def _replace(self, words: Iterable[str]) -> None:
        self._words = sorted({w for w in (normalize_word(word) for word in words) if w})
        self._size_when_saved = len(self._words)

    def save_target(self) -> Optional[Path]:
        if self.config.save_path is not None:
            return Path(self.config.save_path)
        if self.config.path is not None and not is_url(self.config.path):
            return Path(self.config.path)
        return None

    def save(self, path: Path | str | None = None) -> int:
        """Write the lexicon and return the number of words written.

        The full sorted list is written unless ``config.sample_size`` asks for
        the legacy random sample (never more than 1000 words).
        """

        target = Path(path) if path is not None else self.save_target()
        if target is None:
            raise LexiconSaveError("No save path configured for lexicon")

        entries = self._words
        if self.config.sample_size is not None:
            k = min(self.config.sample_size, MAX_SAVE_SAMPLE, len(self._words))
            entries = sorted(self._rng.sample(self._words, k))

        count = write_word_list(target, entries)
        self._size_when_saved = len(self._words)
        LOGGER.info("Saved %d words to %s", count, target)
        return count

    def needs_save(self) -> bool:
        return len(self._words) - self._size_when_saved >= self.config.save_threshold

    def _autosave(self) -> None:
        if not self.config.autosave or not self.needs_save():
            return
        if self.save_target() is None:
            LOGGER.debug("Save threshold reached but no save path is configured")
            return
        try:
            self.save()
        except LexiconSaveError as exc:
            LOGGER.warning("Automatic lexicon save failed, will retry: %s", exc)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def should_admit(self, difficulty: int) -> bool:
        """Return ``True`` with probability ``difficulty / 10``."""

        check_difficulty(difficulty)
        return self._rng.random() < difficulty / MAX_DIFFICULTY

    def learn(self, word: Optional[str], difficulty: int) -> bool:
        admitted = self.should_admit(difficulty)
        word = normalize_word(word)
        learned = False
        if admitted and word and not self.contains(word):
            bisect.insort(self._words, word)
            learned = True
            LOGGER.debug("Learned %r (difficulty %d)", word, difficulty)
        self._autosave()
        return learned

    def forget(self, word: Optional[str]) -> bool:
        word = fold_case(word)
        index = self._index_of(word)
        if index is None:
            return False
        del self._words[index]
        LOGGER.debug("Forgot %r", word)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def _index_of(self, word: str) -> Optional[int]:
        if not word:
            return None
        index = bisect.bisect_left(self._words, word)
        if index < len(self._words) and self._words[index] == word:
            return index
        return None

    def contains(self, word: Optional[str]) -> bool:
        return self._index_of(fold_case(word)) is not None

    def has_prefix(self, prefix: Optional[str]) -> bool:
        if prefix is None:
            return False
        prefix = fold_case(prefix)
        index = bisect.bisect_left(self._words, prefix)
        return index < len(self._words) and self._words[index].startswith(prefix)

    def completions(self, prefix: Optional[str], limit: Optional[int] = None) -> List[str]:
        """Return the words starting with ``prefix`` in sorted order."""

        if prefix is None:
            return []
        prefix = fold_case(prefix)
        start = bisect.bisect_left(self._words, prefix)
        matches: List[str] = []
        for word in self._words[start:]:
            if not word.startswith(prefix):
                break
            if limit is not None and len(matches) >= limit:
                break
            matches.append(word)
        return matches

    @property
    def words(self) -> Tuple[str, ...]:
        return tuple(self._words)

    def is_sorted(self) -> bool:
        return all(a < b for a, b in zip(self._words, self._words[1:]))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._words))

    def __getitem__(self, index: int) -> str:
        return self._words[index]
