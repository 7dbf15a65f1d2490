"""Shared constants and enumerations for the word grid core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


DIMENSION = 4
NON_LETTER = "\0"

# Classic Boggle die-face frequencies, out of 96 faces.
LETTER_WEIGHTS: Dict[str, int] = {
    "j": 1, "k": 1, "q": 1, "y": 1, "z": 1,
    "b": 2, "c": 2, "f": 2, "g": 2, "m": 2, "p": 2, "v": 2,
    "d": 3, "u": 3, "w": 3, "x": 3,
    "h": 5, "l": 5, "r": 5,
    "a": 6, "i": 6, "n": 6, "o": 6, "s": 6,
    "e": 10, "t": 10,
}

# Row-major scan of the 3x3 block around a cell, centre included. The centre
# step never matches because that cell is in use while its neighbours are tried.
NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)
)

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10

SAVE_THRESHOLD = 20
MAX_SAVE_SAMPLE = 1000


class LoadStatus(str, Enum):
    """Outcome of a lexicon bulk load."""

    LOADED = "LOADED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
