"""Global pytest fixtures and hooks for courier."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = ("unit", "functional")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items in `tests/unit/` and `tests/functional/` after their folder."""
    for item in items:
        path = item.path.resolve()
        for name in DIRECTORY_MARKERS:
            if TESTS_ROOT / name not in path.parents:
                continue
            if not any(marker.name == name for marker in item.iter_markers()):
                item.add_marker(getattr(pytest.mark, name))


@pytest.fixture
def isolated_root_logger() -> Iterator[logging.Logger]:
    """Restore the root logger's handlers and level after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)
