"""Test configuration.

Pytest sometimes runs with the current working directory set to ``tests/``.
Make sure the project root (and thus the ``mazecast`` package) is importable.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mazecast.models import Grid  # noqa: E402


class FakeDisplay:
    """Records paint calls and replays a scripted list of commands."""

    def __init__(self, rows: int = 20, cols: int = 40, commands: Optional[list] = None) -> None:
        self.rows = rows
        self.cols = cols
        self.commands = list(commands or [])
        self.cells: dict[tuple[int, int], tuple[str, int]] = {}
        self.text: dict[tuple[int, int], str] = {}
        self.clock = 0.0
        self.clears = 0
        self.presents = 0

    def viewport_size(self) -> tuple[int, int]:
        return self.rows, self.cols

    def set_cell_color(self, row, col, surface, band) -> None:
        self.cells[(row, col)] = (surface, band)

    def fill_column(self, col, top, bottom, surface, band) -> None:
        for row in range(top, bottom):
            self.cells[(row, col)] = (surface, band)

    def write_text(self, row, col, text) -> None:
        self.text[(row, col)] = text

    def poll_input(self):
        if self.commands:
            return self.commands.pop(0)
        return None

    def now(self) -> float:
        self.clock += 0.05
        return self.clock

    def clear(self) -> None:
        self.cells.clear()
        self.text.clear()
        self.clears += 1

    def present(self) -> None:
        self.presents += 1


@pytest.fixture
def open_grid() -> Grid:
    """5x5 with no walls at all."""
    return Grid.from_rows(["     "] * 5)


@pytest.fixture
def column_grid() -> Grid:
    """5x5 open except a full wall column at x=2."""
    return Grid.from_rows(["  #  "] * 5)


@pytest.fixture
def fake_display():
    return FakeDisplay
