from abc import ABC, abstractmethod
from typing import List

from ..editing.ranges import Range
from ..editing.whitespace_diff import Replacement


class FormattingEngine(ABC):
    """A whole-file formatter.

    Implementations must be safe to call from several threads at once;
    snippet formatting keeps no state of its own and relies on that.
    The only error an engine may raise is
    :class:`~snippet_formatter.errors.FormatterError`.
    """

    @classmethod
    def from_config(cls, config) -> "FormattingEngine":
        """Build the engine from a :class:`~snippet_formatter.config.Config`."""
        return cls()

    # ── Public entry points ──

    @abstractmethod
    def format_whole(self, source: str) -> str:
        """Format a complete compilation unit, fixing imports and
        reflowing long strings where the engine supports it."""

    @abstractmethod
    def format_regions_with_comments(
        self, source: str, regions: List[Range]
    ) -> List[Replacement]:
        """Format only ``regions`` of a compilation unit, comments included.

        The result is already restricted to ``regions``.
        """
