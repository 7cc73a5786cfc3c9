"""
Snippet wrapper — synthesizes a complete compilation unit around a
code snippet so a whole-file formatter can process it.

The dummy scaffolding is already correctly formatted (blocks use the
right indentation), so the formatter leaves it alone and only the
snippet's own whitespace changes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..errors import InvalidArgument
from .indentation import create_indentation_string

_CLASS_OPEN = "class Dummy {\n"
_BLOCK_OPEN = "{\n"
_EXPRESSION_PREFIX = "Object o = "
_EXPRESSION_SUFFIX = ";"


class FragmentCategory(enum.Enum):
    """The kind of snippet to format."""
    PROGRAM = "program"
    MEMBER_DECLARATIONS = "member_declarations"
    STATEMENTS = "statements"
    EXPRESSION = "expression"


@dataclass(frozen=True)
class SyntheticWrapper:
    """A synthesized buffer and the offset at which the snippet starts."""
    contents: str
    offset: int
    source_length: int

    @property
    def suffix_length(self) -> int:
        return len(self.contents) - self.offset - self.source_length

    def extract(self, formatted: str) -> str:
        """Cut the snippet back out of the formatter's output.

        The scaffolding before ``offset`` and after the snippet is
        assumed to survive formatting with its length unchanged.
        """
        return formatted[self.offset:len(formatted) - self.suffix_length]


def _closing_braces(levels: int) -> str:
    return "".join(
        "\n" + create_indentation_string(i) + "}"
        for i in range(levels - 1, -1, -1)
    )


def wrap(
    category: FragmentCategory,
    source: str,
    initial_indent: int,
) -> SyntheticWrapper:
    """Wrap ``source`` so it becomes a complete compilation unit.

    Programs and member declarations are nested in ``initial_indent``
    dummy classes.  Statements get one dummy class plus a block per
    extra indentation level; expressions additionally become the
    initializer of a dummy local variable.
    """
    if initial_indent < 0:
        raise InvalidArgument(
            f"Indentation level cannot be less than zero. Given: {initial_indent}"
        )

    if category in (FragmentCategory.PROGRAM, FragmentCategory.MEMBER_DECLARATIONS):
        prefix = [
            _CLASS_OPEN + create_indentation_string(i)
            for i in range(1, initial_indent + 1)
        ]
        suffix = _closing_braces(initial_indent)
    elif category in (FragmentCategory.STATEMENTS, FragmentCategory.EXPRESSION):
        prefix = [_CLASS_OPEN + create_indentation_string(1)]
        prefix.extend(
            _BLOCK_OPEN + create_indentation_string(i)
            for i in range(2, initial_indent + 1)
        )
        # A statement needs its class even at indentation level zero.
        suffix = _closing_braces(max(initial_indent, 1))
        if category is FragmentCategory.EXPRESSION:
            prefix.append(_EXPRESSION_PREFIX)
            suffix = _EXPRESSION_SUFFIX + suffix
    else:
        raise InvalidArgument(f"Unknown snippet kind: {category!r}")

    head = "".join(prefix)
    return SyntheticWrapper(
        contents=head + source + suffix,
        offset=len(head),
        source_length=len(source),
    )
