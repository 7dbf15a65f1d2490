"""Shared helpers for word normalization."""

from __future__ import annotations

from typing import Optional


def normalize_word(text: Optional[str]) -> str:
    """Return the lower-cased, whitespace-stripped form of ``text``.

    Used on words entering the lexicon (loads and learns).
    """

    if not text:
        return ""
    return text.strip().lower()


def fold_case(text: Optional[str]) -> str:
    """Lower-case ``text`` for lookups, keeping any surrounding whitespace."""

    if not text:
        return ""
    return text.lower()


__all__ = ["fold_case", "normalize_word"]
