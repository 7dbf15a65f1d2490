"""Word grid core for a Boggle-style word game.

This package exposes the public API surface via:

- ``boggle.engine.grid.LetterGrid``: the 4x4 letter grid and its in-use mask.
- ``boggle.engine.locator.is_on_board``: traces a word across the grid.
- ``boggle.data.lexicon.Lexicon``: the sorted, learnable word list.
- ``boggle.engine.enumerator.BoardWordEnumerator``: the automated opponent.

Round bookkeeping, scoring and user interfaces live outside this package.
"""

from .data.lexicon import Lexicon, LexiconConfig
from .engine.classification import classify_words
from .engine.enumerator import BoardWordEnumerator, find_all_words
from .engine.grid import GridConfig, LetterGrid
from .engine.locator import find_path, is_on_board

__all__ = [
    "BoardWordEnumerator",
    "GridConfig",
    "LetterGrid",
    "Lexicon",
    "LexiconConfig",
    "classify_words",
    "find_all_words",
    "find_path",
    "is_on_board",
]

__version__ = "0.1.0"
