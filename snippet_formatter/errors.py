"""
Error taxonomy for snippet formatting.

All three are caught at the host boundary and turned into "no edit".
"""


class SnippetFormatError(Exception):
    """Base class for every failure a format request can report."""


class InvalidArgument(SnippetFormatError, ValueError):
    """Malformed kind code, negative indentation or illegal kind/comments mix."""


class InvariantViolation(SnippetFormatError):
    """The formatter changed non-whitespace content of the snippet."""


class FormatterError(SnippetFormatError):
    """The formatting engine rejected its input or could not run."""
