"""Snippet formatting core — wrapping, range translation and whitespace diffs."""

from .indentation import INDENTATION_SIZE, create_indentation_string
from .ranges import Range, RangeSet, shift, shift_all
from .snippet_wrapper import FragmentCategory, SyntheticWrapper, wrap
from .whitespace_diff import (
    Replacement, apply_replacements, strip_whitespace, to_replacements,
)
from .idempotency import is_noop

__all__ = [
    "INDENTATION_SIZE", "create_indentation_string",
    "Range", "RangeSet", "shift", "shift_all",
    "FragmentCategory", "SyntheticWrapper", "wrap",
    "Replacement", "apply_replacements", "strip_whitespace", "to_replacements",
    "is_noop",
]
