"""
snippet_formatter — format arbitrary Java snippets with a whole-file formatter.

Public API for library usage::

    from snippet_formatter import Config, HostFormatter, K_STATEMENTS, load_engine

    host = HostFormatter(load_engine(Config.load()))
    edit = host.format(K_STATEMENTS, "int x=1;", 0, 8, 2)
"""

from .config import Config
from .editing import FragmentCategory, Range, Replacement
from .engine import CommandFormattingEngine, FormattingEngine, load_engine
from .errors import (
    FormatterError, InvalidArgument, InvariantViolation, SnippetFormatError,
)
from .host import (
    F_INCLUDE_COMMENTS, K_CLASS_BODY_DECLARATIONS, K_COMPILATION_UNIT,
    K_EXPRESSION, K_STATEMENTS, HostFormatter, ReplaceEdit, TextEdit,
)
from .orchestrator import SnippetFormatter

__all__ = [
    "Config",
    "FragmentCategory", "Range", "Replacement",
    "CommandFormattingEngine", "FormattingEngine", "load_engine",
    "FormatterError", "InvalidArgument", "InvariantViolation", "SnippetFormatError",
    "F_INCLUDE_COMMENTS", "K_CLASS_BODY_DECLARATIONS", "K_COMPILATION_UNIT",
    "K_EXPRESSION", "K_STATEMENTS", "HostFormatter", "ReplaceEdit", "TextEdit",
    "SnippetFormatter",
]
