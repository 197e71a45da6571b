"""
Pytest configuration and shared fixtures for strkit tests.
"""

import pytest

from strkit.engine.args import ArgumentList
from strkit.engine.formatter import Segment, TemplateFormatter
from strkit.runtime.stdlib import random as strkit_random


@pytest.fixture
def formatter_factory():
    """Factory fixture for creating template formatters."""

    def _create_formatter(template: str) -> TemplateFormatter:
        return TemplateFormatter(template)

    return _create_formatter


@pytest.fixture
def fmt(formatter_factory):
    """Fixture to expand a template with positional arguments."""

    def _fmt(template: str, *args) -> str:
        return formatter_factory(template).format(ArgumentList(args))

    return _fmt


@pytest.fixture
def parse_template(formatter_factory):
    """Fixture to parse a template into segments."""

    def _parse(template: str) -> list[Segment]:
        return formatter_factory(template).parse()

    return _parse


@pytest.fixture
def seeded_rng():
    """Seed the shared generator and restore a fresh one afterwards."""
    strkit_random.set_seed(1234)
    yield
    with strkit_random._rng_lock:
        strkit_random._rng = None


@pytest.fixture
def clean_env(monkeypatch):
    """Remove strkit environment variables for the duration of a test."""
    for name in ("STRKIT_LOG_LEVEL", "STRKIT_KEEP_EMPTY", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
