"""
Engine registry — resolves the configured formatting engine once, at
composition time.
"""

from __future__ import annotations

import importlib
import importlib.metadata
import logging

from ..errors import InvalidArgument
from .base import FormattingEngine
from .command import CommandFormattingEngine

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "snippet_formatter.engines"

_BUILTIN_ENGINES: dict[str, type[FormattingEngine]] = {
    "command": CommandFormattingEngine,
}


def _load_from_path(dotted_path: str) -> type | None:
    """Load an engine class from a dotted import path.

    Example: ``my_package.engines.InProcessEngine``
    """
    try:
        module_path, cls_name = dotted_path.rsplit(".", 1)
        module = importlib.import_module(module_path)
        return getattr(module, cls_name)
    except (ImportError, AttributeError, ValueError) as e:
        logger.warning("[EngineRegistry] Failed to load '%s': %s", dotted_path, e)
    return None


def _load_from_entry_point(name: str) -> type | None:
    for ep in importlib.metadata.entry_points().select(group=ENTRY_POINT_GROUP):
        if ep.name == name:
            try:
                return ep.load()
            except Exception as e:
                logger.warning(
                    "[EngineRegistry] Failed to load entry point '%s': %s",
                    ep.name, e,
                )
                return None
    return None


def resolve_engine_class(name: str) -> type[FormattingEngine]:
    """Map an engine name to its class.

    Built-in names win, then entry points in the
    ``snippet_formatter.engines`` group, then dotted import paths.
    """
    cls = _BUILTIN_ENGINES.get(name)
    if cls is None:
        cls = _load_from_entry_point(name)
    if cls is None and "." in name:
        cls = _load_from_path(name)
    if cls is None:
        raise InvalidArgument(f"Unknown formatting engine: {name!r}")
    if not (isinstance(cls, type) and issubclass(cls, FormattingEngine)):
        raise InvalidArgument(f"{name!r} is not a FormattingEngine subclass")
    return cls


def load_engine(config) -> FormattingEngine:
    """Instantiate the engine named by ``config.ENGINE``."""
    cls = resolve_engine_class(config.ENGINE)
    engine = cls.from_config(config)
    logger.info("[EngineRegistry] Using engine %s (%s)", config.ENGINE, cls.__name__)
    return engine
