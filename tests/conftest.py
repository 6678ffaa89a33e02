"""Shared fixtures for tagbind tests."""

from __future__ import annotations

import pytest

from tagbind.locale import patterns
from tagbind.locale import get_locale_pattern


@pytest.fixture(autouse=True)
def restore_locale_registry():
    """Undo locale registrations made by a test."""
    snapshot = dict(patterns._PATTERNS)
    yield
    patterns._PATTERNS.clear()
    patterns._PATTERNS.update(snapshot)


@pytest.fixture
def en_us():
    return get_locale_pattern("en-US")


@pytest.fixture
def de_de():
    return get_locale_pattern("de-DE")
