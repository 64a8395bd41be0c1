"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from structeq import equatable, get_registry, get_settings


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch):
    """Leaf registrations made by a test are dropped when it finishes."""
    registry = get_registry()
    monkeypatch.setattr(registry, "_by_type", dict(registry._by_type))
    return registry


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Settings are reloaded from a clean environment for every test."""
    monkeypatch.delenv("STRUCTEQ_DIAGNOSTICS", raising=False)
    monkeypatch.delenv("STRUCTEQ_CHECK_FIELD_NAMES", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@equatable
@dataclass
class FixtureRecord:
    my_int: int = 0
    my_string: str = ""


@pytest.fixture
def record_cls():
    return FixtureRecord
