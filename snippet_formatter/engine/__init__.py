"""Formatting engines — the whole-file formatter behind snippet formatting."""

from .base import FormattingEngine
from .command import CommandFormattingEngine
from .registry import load_engine, resolve_engine_class

__all__ = [
    "FormattingEngine", "CommandFormattingEngine",
    "load_engine", "resolve_engine_class",
]
