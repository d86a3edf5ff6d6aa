"""Tests for the file watch script."""

import asyncio
import importlib.util
import sys
from pathlib import Path

import pytest

from change_detector.core.registry import DetectorRegistry

SCRIPT = Path(__file__).parent.parent / "scripts" / "watch.py"


@pytest.fixture
def watch_module():
    """Load scripts/watch.py as a module."""
    spec = importlib.util.spec_from_file_location("watch_script", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_poll_once_reports_changes(watch_module, test_data_dir: Path, capsys):
    """Test that polls report first sight and later edits only."""
    first = test_data_dir / "a.txt"
    second = test_data_dir / "b.txt"
    first.write_text("one")
    second.write_text("two")

    registry: DetectorRegistry[Path, bytes] = DetectorRegistry(value_type=bytes)
    missing: set[Path] = set()
    paths = [first, second]

    assert watch_module.poll_once(registry, paths, missing) == [first, second]
    assert watch_module.poll_once(registry, paths, missing) == []

    second.write_text("three")
    assert watch_module.poll_once(registry, paths, missing) == [second]
    assert "b.txt changed" in capsys.readouterr().out


def test_poll_once_handles_missing_files(watch_module, test_data_dir: Path, capsys):
    """Test that a vanished file is reported once and counts as new on return."""
    target = test_data_dir / "c.txt"
    target.write_text("data")

    registry: DetectorRegistry[Path, bytes] = DetectorRegistry(value_type=bytes)
    missing: set[Path] = set()

    watch_module.poll_once(registry, [target], missing)
    target.unlink()

    assert watch_module.poll_once(registry, [target], missing) == []
    assert watch_module.poll_once(registry, [target], missing) == []
    assert capsys.readouterr().out.count("(missing)") == 1

    target.write_text("data")
    assert watch_module.poll_once(registry, [target], missing) == [target]


def test_poll_once_handles_unreadable_paths(watch_module, test_data_dir: Path, capsys):
    """Test that a path turned into a directory is reported and polling continues."""
    target = test_data_dir / "d.txt"
    other = test_data_dir / "e.txt"
    target.write_text("data")
    other.write_text("other")

    registry: DetectorRegistry[Path, bytes] = DetectorRegistry(value_type=bytes)
    missing: set[Path] = set()

    watch_module.poll_once(registry, [target, other], missing)
    target.unlink()
    target.mkdir()
    other.write_text("changed")

    assert watch_module.poll_once(registry, [target, other], missing) == [other]
    assert watch_module.poll_once(registry, [target, other], missing) == []
    assert capsys.readouterr().out.count("(unreadable:") == 1
    assert target not in registry


def test_main_stops_after_iterations(watch_module, test_data_dir: Path, monkeypatch, capsys):
    """Test that main polls the requested number of times and sleeps between polls only."""
    target = test_data_dir / "f.txt"
    target.write_text("data")
    sleeps: list[float] = []

    async def fake_sleep(delay: float) -> None:
        sleeps.append(delay)

    monkeypatch.setattr(watch_module.asyncio, "sleep", fake_sleep)
    monkeypatch.setattr(
        sys, "argv", ["watch.py", str(target), "--iterations", "2", "--interval", "0"]
    )

    asyncio.run(watch_module.main())

    out = capsys.readouterr().out
    assert sleeps == [0.0]
    assert out.count("f.txt changed") == 1
    assert "✓ Done after 2 poll(s)" in out
