"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest
from sybil import Sybil
from sybil.parsers.myst import PythonCodeBlockParser

from inject_define_options.testing import FakeReporter

# Sybil configuration for MyST doctest integration
pytest_collect_file = Sybil(
    parsers=[PythonCodeBlockParser()],
    patterns=["*.md"],
).pytest()


@pytest.fixture
def reporter() -> FakeReporter:
    """Returns a FakeReporter that records every status message."""
    return FakeReporter()


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    """Empty views root directory (stands in for src/views)."""
    path = tmp_path / "src" / "views"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_view(views_dir: Path) -> Callable[[str, str], Path]:
    """Factory fixture that writes a component file under the views root.

    Returns:
        Function (relative_path, content) -> absolute Path of the written file
    """

    def _write(relative_path: str, content: str) -> Path:
        path = views_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def write_route_file(tmp_path: Path) -> Callable[[str], Path]:
    """Factory fixture that writes a route file and returns its path."""

    def _write(source: str, name: str = "routes.ts") -> Path:
        path = tmp_path / name
        path.write_bytes(source.encode("utf-8"))
        return path

    return _write
