"""Custom exception hierarchy for the word grid core."""


class BoggleError(Exception):
    """Base exception for word grid failures."""


class GridShapeError(BoggleError, ValueError):
    """Raised when an explicit letter matrix has the wrong dimensions."""


class LexiconLoadError(BoggleError):
    """Raised when a lexicon word source cannot be read."""


class LexiconSaveError(BoggleError):
    """Raised when the lexicon cannot be written back to storage."""
