"""Data models shared by the lexicon and the board engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set

from .constants import LoadStatus


@dataclass(frozen=True)
class LoadResult:
    """Describes how a lexicon bulk load went."""

    status: LoadStatus
    count: int = 0
    source: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == LoadStatus.LOADED


@dataclass
class WordClassification:
    """Partition of one round's words against a board."""

    common: Set[str] = field(default_factory=set)
    human_only: Set[str] = field(default_factory=set)
    computer_only: Set[str] = field(default_factory=set)
    invalid: Set[str] = field(default_factory=set)
