"""Pytest configuration and fixtures."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from change_detector.config.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory for tests."""
    data_dir = tmp_path / "test_data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


@dataclass
class Point:
    x: int
    y: int


@pytest.fixture
def point_cls() -> type[Point]:
    """Simple dataclass used as a detector value type."""
    return Point


@pytest.fixture
def sample_values() -> list:
    """Values of assorted types that must all hash to distinct digests."""
    return [
        None,
        True,
        False,
        0,
        1,
        1.0,
        "",
        "1",
        b"1",
        [1],
        (1,),
        [1, 2],
        ["ab"],
        ["a", "b"],
        {"a": 1},
        {1},
        frozenset({1, 2}),
    ]
