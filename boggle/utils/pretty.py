"""Pretty-print helpers for letter grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable

from ..core.constants import NON_LETTER

if TYPE_CHECKING:
    from ..core.models import WordClassification
    from ..engine.grid import LetterGrid


def cell_symbol(grid: LetterGrid, row: int, col: int) -> str:
    letter = grid.char_at(row, col)
    if letter == NON_LETTER:
        return "."
    return letter.upper()


def format_grid(grid: LetterGrid) -> str:
    width = grid.bounds.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(grid.bounds.rows):
        row_cells = [cell_symbol(grid, r, c) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: LetterGrid, *, label: str | None = None, stream=None) -> None:
    """Print the letter grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def _format_words(words: Iterable[str]) -> str:
    ordered = sorted(words)
    return ", ".join(ordered) if ordered else "-"


def format_classification(classification: WordClassification) -> str:
    return "\n".join(
        [
            f"common        : {_format_words(classification.common)}",
            f"human only    : {_format_words(classification.human_only)}",
            f"computer only : {_format_words(classification.computer_only)}",
            f"invalid       : {_format_words(classification.invalid)}",
        ]
    )
