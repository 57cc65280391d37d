# -*- coding: utf-8 -*-
"""Core data models (occupancy grid, player state, configuration)."""
from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from .constants import (
    BANDS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    FOV_DEFAULT,
    FOV_MAX,
    FOV_MIN,
    FOV_STEP,
    MAX_DEPTH,
    MIN_SIZE,
    MOVE_STEP,
    OPEN,
    STEP,
    TURN_STEP,
    WALL,
)
from .errors import ConfigurationError


@dataclass(frozen=True)
class Grid:
    """Dense wall/open field, ``cells[row * width + col]`` is True for walls."""

    width: int
    height: int
    cells: tuple[bool, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != self.width * self.height:
            raise ConfigurationError(
                f"grid of {self.width}x{self.height} needs {self.width * self.height} cells, "
                f"got {len(self.cells)}"
            )

    @classmethod
    def from_rows(cls, rows: list[str]) -> "Grid":
        height = len(rows)
        width = len(rows[0]) if height else 0
        cells = tuple(ch == WALL for row in rows for ch in row)
        return cls(width=width, height=height, cells=cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_wall(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return self.cells[y * self.width + x]

    def rows(self) -> Iterator[str]:
        w = self.width
        for y in range(self.height):
            yield "".join(WALL if c else OPEN for c in self.cells[y * w : (y + 1) * w])


@dataclass
class Player:
    x: float
    y: float
    ang: float
    fov: float = FOV_DEFAULT

    def cell(self) -> tuple[int, int]:
        return math.floor(self.x), math.floor(self.y)


@dataclass
class Settings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    max_depth: float = MAX_DEPTH
    step: float = STEP
    bands: int = BANDS
    seed: Optional[int] = None

    fov: float = FOV_DEFAULT
    move_step: float = MOVE_STEP
    turn_step: float = TURN_STEP
    fov_step: float = FOV_STEP

    show_map: bool = True
    debug: bool = True
    frames: int = 0  # 0 = until quit

    def validate(self) -> "Settings":
        """Raise ConfigurationError for values the renderer cannot use."""
        if self.width < MIN_SIZE or self.height < MIN_SIZE:
            raise ConfigurationError(
                f"map must be at least {MIN_SIZE}x{MIN_SIZE}, got {self.width}x{self.height}"
            )
        for name in ("max_depth", "step", "move_step", "turn_step", "fov_step"):
            if not getattr(self, name) > 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.step >= self.max_depth:
            raise ConfigurationError("step must be smaller than max_depth")
        if self.bands < 2:
            raise ConfigurationError(f"bands must be at least 2, got {self.bands}")
        if not FOV_MIN <= self.fov <= FOV_MAX:
            raise ConfigurationError(
                f"fov must lie in [{FOV_MIN:.4f}, {FOV_MAX:.4f}] radians, got {self.fov!r}"
            )
        if self.frames < 0:
            raise ConfigurationError("frames cannot be negative")
        return self
