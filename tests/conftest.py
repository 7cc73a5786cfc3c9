"""Shared fixtures: an in-memory formatting engine and a clean environment."""

import os

import pytest

from snippet_formatter.engine.base import FormattingEngine


class FakeEngine(FormattingEngine):
    """Engine that applies a plain text transform and records its calls."""

    def __init__(self, transform=None, region_result=None, error=None):
        self.transform = transform or (lambda text: text)
        self.region_result = region_result or []
        self.error = error
        self.whole_calls: list[str] = []
        self.region_calls: list[tuple] = []

    def format_whole(self, source):
        self.whole_calls.append(source)
        if self.error:
            raise self.error
        return self.transform(source)

    def format_regions_with_comments(self, source, regions):
        self.region_calls.append((source, list(regions)))
        if self.error:
            raise self.error
        return list(self.region_result)


@pytest.fixture
def fake_engine():
    """Factory for FakeEngine instances."""
    return FakeEngine


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("SNIPPETFMT_"):
            monkeypatch.delenv(key, raising=False)
