"""Tests for engine resolution."""

import pytest

from snippet_formatter.config import Config
from snippet_formatter.engine.command import CommandFormattingEngine
from snippet_formatter.engine.registry import load_engine, resolve_engine_class
from snippet_formatter.errors import InvalidArgument


class TestResolveEngineClass:
    def test_builtin_command(self):
        assert resolve_engine_class("command") is CommandFormattingEngine

    def test_dotted_path(self):
        cls = resolve_engine_class(
            "snippet_formatter.engine.command.CommandFormattingEngine"
        )
        assert cls is CommandFormattingEngine

    def test_unknown_name(self):
        with pytest.raises(InvalidArgument, match="Unknown formatting engine"):
            resolve_engine_class("nope")

    def test_missing_module(self):
        with pytest.raises(InvalidArgument):
            resolve_engine_class("no_such_pkg.engines.Engine")

    def test_not_an_engine(self):
        with pytest.raises(InvalidArgument, match="not a FormattingEngine"):
            resolve_engine_class("snippet_formatter.config.Config")


class TestLoadEngine:
    def test_builds_command_engine_from_config(self):
        cfg = Config({
            "engine_command": ["palantir-java-format", "--palantir"],
            "engine_timeout": 5,
            "fix_imports": False,
        })
        engine = load_engine(cfg)
        assert isinstance(engine, CommandFormattingEngine)
        assert engine.command == ["palantir-java-format", "--palantir"]
        assert engine._timeout == 5.0
        assert engine._fix_imports is False
        assert engine._reflow_strings is True
