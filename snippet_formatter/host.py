"""
Host editor integration — the "format selection" entry point an editor
calls.  Decodes kind codes, runs the orchestrator and turns the result
into a text edit, or ``None`` when the document must stay untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .editing.idempotency import is_noop
from .editing.indentation import create_indentation_string
from .editing.ranges import Range
from .editing.snippet_wrapper import FragmentCategory
from .editing.whitespace_diff import Replacement
from .engine.base import FormattingEngine
from .engine.registry import load_engine
from .errors import FormatterError, InvalidArgument, InvariantViolation
from .orchestrator import SnippetFormatter

logger = logging.getLogger(__name__)

# Kind codes understood by format(); F_INCLUDE_COMMENTS may be or-ed in.
K_EXPRESSION = 0
K_STATEMENTS = 1
K_CLASS_BODY_DECLARATIONS = 2
K_COMPILATION_UNIT = 3
F_INCLUDE_COMMENTS = 0x1000

_KIND_TO_CATEGORY = {
    K_EXPRESSION: FragmentCategory.EXPRESSION,
    K_STATEMENTS: FragmentCategory.STATEMENTS,
    K_CLASS_BODY_DECLARATIONS: FragmentCategory.MEMBER_DECLARATIONS,
    K_COMPILATION_UNIT: FragmentCategory.PROGRAM,
}


@dataclass(frozen=True)
class ReplaceEdit:
    """Replace ``length`` characters at ``offset`` with ``text``."""
    offset: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass
class TextEdit:
    """An ordered group of non-overlapping replace edits."""
    children: list[ReplaceEdit] = field(default_factory=list)

    def add_child(self, edit: ReplaceEdit) -> None:
        self.children.append(edit)

    def apply(self, text: str) -> str:
        parts: list[str] = []
        pos = 0
        for edit in self.children:
            parts.append(text[pos:edit.offset])
            parts.append(edit.text)
            pos = edit.end
        parts.append(text[pos:])
        return "".join(parts)

    def to_dicts(self) -> list[dict]:
        return [
            {"offset": e.offset, "length": e.length, "text": e.text}
            for e in self.children
        ]


def decode_kind(kind: int) -> tuple[FragmentCategory, bool]:
    """Split a kind code into its snippet category and comment flag."""
    include_comments = (kind & F_INCLUDE_COMMENTS) == F_INCLUDE_COMMENTS
    kind &= ~F_INCLUDE_COMMENTS
    try:
        return _KIND_TO_CATEGORY[kind], include_comments
    except KeyError:
        raise InvalidArgument(f"Unknown snippet kind: {kind}") from None


def edit_from_replacements(replacements: list[Replacement]) -> TextEdit:
    edit = TextEdit()
    for replacement in replacements:
        edit.add_child(ReplaceEdit(
            replacement.start,
            replacement.end - replacement.start,
            replacement.text,
        ))
    return edit


class HostFormatter:
    """Format selections on behalf of an editor.

    Formatting is best-effort: any failure leaves the document alone.
    """

    def __init__(self, engine: FormattingEngine) -> None:
        self._formatter = SnippetFormatter(engine)

    @classmethod
    def from_config(cls, config) -> "HostFormatter":
        return cls(load_engine(config))

    def format(
        self,
        kind: int,
        source: str,
        offset: int,
        length: int,
        indentation_level: int,
        line_separator: str | None = None,
    ) -> TextEdit | None:
        """Format the single region ``[offset, offset + length)``."""
        try:
            regions = [Range.from_offset(offset, length)]
        except InvalidArgument as exc:
            logger.warning("[SnippetFormat] Not formatting: %s", exc)
            return None
        return self._format_internal(kind, source, regions, indentation_level)

    def format_regions(
        self,
        kind: int,
        source: str,
        regions: list[Range],
        indentation_level: int,
        line_separator: str | None = None,
    ) -> TextEdit | None:
        """Format ``regions`` of ``source``.

        ``line_separator`` is accepted for editor API compatibility; the
        engine decides line endings.
        """
        return self._format_internal(kind, source, list(regions), indentation_level)

    def create_indentation_string(self, indentation_level: int) -> str:
        return create_indentation_string(indentation_level)

    def _format_internal(
        self,
        kind: int,
        source: str,
        regions: list[Range],
        indentation_level: int,
    ) -> TextEdit | None:
        try:
            category, include_comments = decode_kind(kind)
            replacements = self._formatter.format(
                category, source, regions, indentation_level, include_comments
            )
        except (InvalidArgument, InvariantViolation, FormatterError) as exc:
            # Do not format on errors.
            logger.warning("[SnippetFormat] Not formatting: %s", exc)
            return None

        if not replacements or is_noop(source, len(regions), replacements):
            # Do not create edits if there's no diff.
            return None
        return edit_from_replacements(replacements)
