"""
Whitespace diff — minimal replacements between two texts that differ
in whitespace alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import InvariantViolation
from .ranges import Range

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 200


@dataclass(frozen=True)
class Replacement:
    """Replace ``range`` of the original text with ``text``."""
    range: Range
    text: str

    @classmethod
    def create(cls, start: int, end: int, text: str) -> "Replacement":
        return cls(Range(start, end), text)

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end


def strip_whitespace(text: str) -> str:
    return "".join(ch for ch in text if not ch.isspace())


def _next_non_whitespace(text: str, start: int) -> int:
    for idx in range(start, len(text)):
        if not text[idx].isspace():
            return idx
    return -1


def _preview(text: str) -> str:
    if len(text) <= _PREVIEW_CHARS:
        return repr(text)
    return repr(text[:_PREVIEW_CHARS]) + f"... ({len(text)} chars)"


def to_replacements(source: str, formatted: str) -> list[Replacement]:
    """Generate replacements rewriting ``source`` into ``formatted``.

    Both texts must be identical once whitespace is removed; anything
    else means the formatter touched real content and raises
    :class:`InvariantViolation`.  Each replacement covers the whitespace
    between two consecutive non-whitespace characters, so the result is
    sorted and non-overlapping.  Whitespace after the last
    non-whitespace character is never replaced.
    """
    if strip_whitespace(source) != strip_whitespace(formatted):
        raise InvariantViolation(
            f"source = {_preview(source)}, replacement = {_preview(formatted)}"
        )

    replacements: list[Replacement] = []
    i = _next_non_whitespace(source, 0)
    j = _next_non_whitespace(formatted, 0)

    if i == -1:
        # Whitespace only on both sides.
        if source != formatted:
            replacements.append(Replacement.create(0, len(source), formatted))
        return replacements

    if (i != 0 or j != 0) and source[:i] != formatted[:j]:
        replacements.append(Replacement.create(0, i, formatted[:j]))

    while True:
        i2 = _next_non_whitespace(source, i + 1)
        j2 = _next_non_whitespace(formatted, j + 1)
        if i2 == -1 or j2 == -1:
            break
        old = source[i + 1:i2]
        new = formatted[j + 1:j2]
        if (i2 - i) != (j2 - j) or old != new:
            replacements.append(Replacement.create(i + 1, i2, new))
        i, j = i2, j2

    logger.debug(
        "[WhitespaceDiff] %d replacement(s) for %d -> %d chars",
        len(replacements), len(source), len(formatted),
    )
    return replacements


def apply_replacements(source: str, replacements: list[Replacement]) -> str:
    """Apply sorted, non-overlapping replacements in a single pass."""
    parts: list[str] = []
    pos = 0
    for rep in replacements:
        parts.append(source[pos:rep.start])
        parts.append(rep.text)
        pos = rep.end
    parts.append(source[pos:])
    return "".join(parts)
