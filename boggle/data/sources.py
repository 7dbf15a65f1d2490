"""Readers and writers for line-oriented word lists."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

import requests

from ..core.exceptions import LexiconLoadError, LexiconSaveError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

WordSource = Union[str, Path, Iterable[str]]

DEFAULT_TIMEOUT_SECONDS = 30.0


def is_url(source: object) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def describe_source(source: WordSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return f"<{type(source).__name__}>"


def read_word_source(
    source: WordSource,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> List[str]:
    """Return the non-blank, stripped lines of ``source``.

    ``source`` may be a filesystem path, an ``http(s)://`` URL or an iterable
    of lines. Any failure to read raises :class:`LexiconLoadError`.
    """

    if is_url(source):
        lines = _fetch_lines(str(source), timeout_seconds)
    elif isinstance(source, (str, Path)):
        path = Path(source)
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise LexiconLoadError(f"Cannot read word list {path}: {exc}") from exc
    else:
        try:
            lines = list(source)
        except TypeError as exc:
            raise LexiconLoadError(f"Unsupported word source: {source!r}") from exc

    words: List[str] = []
    for line in lines:
        if not isinstance(line, str):
            raise LexiconLoadError(f"Word source yielded a non-string line: {line!r}")
        line = line.strip()
        if line:
            words.append(line)
    return words


def _fetch_lines(url: str, timeout_seconds: float) -> List[str]:
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise LexiconLoadError(f"Word list request failed: {exc}") from exc
    LOGGER.debug("Fetched word list from %s (%d bytes)", url, len(response.content))
    return response.text.splitlines()


def write_word_list(path: Union[str, Path], words: Iterable[str]) -> int:
    """Write ``words`` one per line and return how many were written."""

    destination = Path(path)
    entries = list(words)
    body = "".join(f"{word}\n" for word in entries)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(body, encoding="utf-8")
    except OSError as exc:
        raise LexiconSaveError(f"Cannot write word list {destination}: {exc}") from exc
    return len(entries)


__all__ = [
    "WordSource",
    "describe_source",
    "is_url",
    "read_word_source",
    "write_word_list",
]
