"""Letter grid representation and cell availability helpers."""

from __future__ import annotations

import random
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from ..core.constants import DIMENSION, LETTER_WEIGHTS, NON_LETTER, Bounds
from ..core.exceptions import GridShapeError
from ..utils.logger import get_logger
from .locator import is_on_board


LOGGER = get_logger(__name__)

_LETTERS: Tuple[str, ...] = tuple(LETTER_WEIGHTS)
_WEIGHTS: Tuple[int, ...] = tuple(LETTER_WEIGHTS.values())


@dataclass
class GridConfig:
    """Configuration values driving the grid."""

    dimension: int = DIMENSION
    rng_seed: Optional[int] = None
    rng: Optional[random.Random] = None

    def bounds(self) -> Bounds:
        return Bounds(rows=self.dimension, cols=self.dimension)


class LetterGrid:
    """Square grid of letters with a parallel in-use mask.

    Cells read through :meth:`char_at` or :meth:`use_char_at` return
    :data:`NON_LETTER` when the position is out of range or already
    committed to the path being searched. Neither accessor raises for bad
    coordinates, so a search can probe every neighbour uniformly.
    """

    def __init__(self, config: Optional[GridConfig] = None) -> None:
        self.config = config or GridConfig()
        self.bounds = self.config.bounds()
        self.rng = self.config.rng or random.Random(self.config.rng_seed)
        self.letters: List[List[str]] = [
            [NON_LETTER for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]
        self.in_use: List[List[bool]] = [
            [False for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[str]],
        config: Optional[GridConfig] = None,
    ) -> "LetterGrid":
        """Build a grid from an explicit letter matrix.

        ``rows`` may be a sequence of strings (``["cats", ...]``) or of
        single-letter sequences (``[["C", "A", "T", "S"], ...]``). Letters are
        lower-cased. A matrix of the wrong shape raises :class:`GridShapeError`.
        """

        grid = cls(config)
        size = grid.bounds.rows
        if len(rows) != size:
            raise GridShapeError(f"Expected {size} rows, got {len(rows)}")
        for r, row in enumerate(rows):
            if len(row) != size:
                raise GridShapeError(f"Row {r} has {len(row)} cells, expected {size}")
            for c, letter in enumerate(row):
                if not isinstance(letter, str) or len(letter) != 1 or letter == NON_LETTER:
                    raise GridShapeError(f"Invalid letter {letter!r} at {(r, c)}")
                grid.letters[r][c] = letter.lower()
        return grid

    # ------------------------------------------------------------------
    # Mixing
    # ------------------------------------------------------------------
    def mix(self) -> None:
        """Refill every cell from the Boggle letter distribution.

        As a side effect all in-use flags are cleared.
        """

        picks = self.rng.choices(_LETTERS, weights=_WEIGHTS, k=self.bounds.rows * self.bounds.cols)
        for index, letter in enumerate(picks):
            row, col = divmod(index, self.bounds.cols)
            self.letters[row][col] = letter
        self.un_use_all()
        LOGGER.debug("Mixed grid: %s", self.as_string())

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def _available(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col) and not self.in_use[row][col]

    def char_at(self, row: int, col: int) -> str:
        if not self._available(row, col):
            return NON_LETTER
        return self.letters[row][col]

    def use_char_at(self, row: int, col: int) -> str:
        """Like :meth:`char_at`, but also marks the cell in use on success."""

        if not self._available(row, col):
            return NON_LETTER
        self.in_use[row][col] = True
        return self.letters[row][col]

    def un_use_char_at(self, row: int, col: int) -> None:
        if self.bounds.contains(row, col):
            self.in_use[row][col] = False

    def un_use_all(self) -> None:
        for row in self.in_use:
            for col in range(len(row)):
                row[col] = False

    def is_in_use(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col) and self.in_use[row][col]

    def any_in_use(self) -> bool:
        return any(any(row) for row in self.in_use)

    @contextmanager
    def claim(self, row: int, col: int) -> Iterator[str]:
        """Commit a cell for the duration of a ``with`` block.

        The cell is released on every exit path, including early returns and
        exceptions raised inside the block.
        """

        letter = self.use_char_at(row, col)
        try:
            yield letter
        finally:
            if letter != NON_LETTER:
                self.un_use_char_at(row, col)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_on_board(self, word: Optional[str]) -> bool:
        return is_on_board(self, word)

    def cells(self) -> Iterator[Tuple[int, int]]:
        for row in range(self.bounds.rows):
            for col in range(self.bounds.cols):
                yield row, col

    def as_string(self) -> str:
        return "".join(
            letter if letter != NON_LETTER else "." for row in self.letters for letter in row
        )

    def to_jsonable(self) -> List[List[Optional[str]]]:
        return [
            [letter if letter != NON_LETTER else None for letter in row] for row in self.letters
        ]
