"""Indentation renderer — indentation level to literal whitespace."""

from __future__ import annotations

from ..errors import InvalidArgument

INDENTATION_SIZE = 4


def create_indentation_string(level: int) -> str:
    """Return ``level * INDENTATION_SIZE`` spaces."""
    if level < 0:
        raise InvalidArgument(
            f"Indentation level cannot be less than zero. Given: {level}"
        )
    return " " * (level * INDENTATION_SIZE)
