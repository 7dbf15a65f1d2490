"""Backtracking search that traces words across a letter grid.

The search borrows the grid's in-use mask as working state, so two searches
against the same :class:`LetterGrid` must never run at the same time. Every
call leaves the mask fully cleared.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from ..core.constants import NEIGHBOR_STEPS, NON_LETTER

if TYPE_CHECKING:
    from .grid import LetterGrid


CellPath = List[Tuple[int, int]]


def is_on_board(grid: "LetterGrid", word: Optional[str]) -> bool:
    """Return ``True`` iff ``word`` traces a path of adjacent, unrepeated cells.

    ``None`` is never on the board; the empty string always is and does not
    touch the grid.
    """

    if word is None:
        return False
    if not word:
        return True
    return find_path(grid, word) is not None


def find_path(grid: "LetterGrid", word: Optional[str]) -> Optional[CellPath]:
    """Return the cells tracing ``word`` in order, or ``None`` when absent.

    The first path found in row-major start order wins. The empty string maps
    to an empty path.
    """

    if word is None:
        return None
    if not word:
        return []
    grid.un_use_all()
    target = word.lower()
    if NON_LETTER in target:
        return None
    if len(target) > grid.bounds.rows * grid.bounds.cols:
        return None

    for row, col in grid.cells():
        path = _match_from(grid, row, col, target)
        if path is not None:
            return path
    return None


def _match_from(grid: "LetterGrid", row: int, col: int, word: str) -> Optional[CellPath]:
    if grid.char_at(row, col) != word[0]:
        return None
    if len(word) == 1:
        return [(row, col)]

    suffix = word[1:]
    with grid.claim(row, col):
        for dr, dc in NEIGHBOR_STEPS:
            tail = _match_from(grid, row + dr, col + dc, suffix)
            if tail is not None:
                return [(row, col)] + tail
    return None


__all__ = ["find_path", "is_on_board"]
