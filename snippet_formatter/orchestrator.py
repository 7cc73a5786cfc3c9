"""
Format orchestrator — formats a snippet through a whole-file engine and
returns whitespace replacements in the snippet's own offsets.
"""

from __future__ import annotations

import logging

from .editing.ranges import Range, RangeSet, shift_all
from .editing.snippet_wrapper import FragmentCategory, wrap
from .editing.whitespace_diff import Replacement, to_replacements
from .engine.base import FormattingEngine
from .errors import InvalidArgument

logger = logging.getLogger(__name__)


class SnippetFormatter:
    """Run a formatting engine on code snippets, limited to given ranges."""

    def __init__(self, engine: FormattingEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> FormattingEngine:
        return self._engine

    def format(
        self,
        category: FragmentCategory,
        source: str,
        ranges: list[Range],
        initial_indent: int,
        include_comments: bool = False,
    ) -> list[Replacement]:
        """Format ``source`` and return the replacements inside ``ranges``.

        Parameters
        ----------
        category:
            What kind of snippet ``source`` is.
        source:
            The snippet text; offsets in ``ranges`` and in the result refer
            to it.
        ranges:
            Requested regions. Only replacements fully enclosed by their
            union are returned.
        initial_indent:
            Indentation level the snippet sits at in the host document.
        include_comments:
            Format comments too. Only compilation units support this; the
            engine's own region-aware formatting is used unchanged.

        Raises
        ------
        InvalidArgument
            Comment formatting requested for anything but a program.
        InvariantViolation
            The engine changed non-whitespace content of the snippet.
        FormatterError
            The engine rejected the wrapped snippet.
        """
        range_set = RangeSet(ranges)
        if include_comments:
            if category is not FragmentCategory.PROGRAM:
                raise InvalidArgument(
                    "comment formatting is only supported for compilation units"
                )
            return self._engine.format_regions_with_comments(source, list(ranges))

        wrapper = wrap(category, source, initial_indent)
        logger.debug(
            "[SnippetFormat] %s snippet at offset %d, regions %s",
            category.value, wrapper.offset,
            [(r.start, r.end) for r in shift_all(ranges, wrapper.offset)],
        )

        formatted = self._engine.format_whole(wrapper.contents)
        formatted = wrapper.extract(formatted)

        replacements = [
            r for r in to_replacements(source, formatted)
            if range_set.encloses(r.range)
        ]
        logger.debug(
            "[SnippetFormat] %d replacement(s) inside requested regions",
            len(replacements),
        )
        return replacements
