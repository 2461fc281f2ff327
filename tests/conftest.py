from __future__ import annotations

import logging
from pathlib import Path

import pytest


@pytest.fixture
def write_log(tmp_path: Path):
    """Write lines to a log file under tmp_path and return its path."""

    def _write(lines: list[str], name: str = "access.log") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _detach_log_handlers():
    """Drop handlers the CLI attached; they hold the runner's closed stderr."""
    yield
    root = logging.getLogger("iplog")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
