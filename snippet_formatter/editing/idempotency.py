"""Idempotency check — does a replacement list leave the text unchanged?"""

from __future__ import annotations

from .whitespace_diff import Replacement


def is_noop(source: str, region_count: int, replacements: list[Replacement]) -> bool:
    """Return True if the replacements provably change nothing.

    Only the single-replacement shape is recognized: either it rewrites
    the whole source with itself, or a single requested region got a
    single replacement whose text equals what it covers.  Several
    replacements that each rewrite text with itself are not detected.
    """
    if len(replacements) != 1:
        return False
    replacement = replacements[0]
    output = replacement.text
    if output == source:
        return True
    if region_count == 1:
        snippet = source[replacement.start:replacement.end]
        if output == snippet:
            return True
    return False
