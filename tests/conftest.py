"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from propcopy import CopierSettings, CopyReport, ShapeRegistry


@pytest.fixture
def settings():
    """Settings isolated from any .env file."""
    return CopierSettings(_env_file=None)


@pytest.fixture
def registry():
    """Fresh ShapeRegistry instance."""
    return ShapeRegistry()


@pytest.fixture
def report():
    """Empty CopyReport."""
    return CopyReport()


@dataclass
class FixtureItem:
    value: int = 0


@dataclass
class FixtureBag:
    items: list[FixtureItem] = field(default_factory=list)


@pytest.fixture
def item_cls():
    return FixtureItem


@pytest.fixture
def bag_cls():
    return FixtureBag
