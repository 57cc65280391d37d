"""Raycasting and projection helpers."""

from __future__ import annotations

import math

from .models import Grid, Player


def ray_angle(heading: float, fov: float, col: int, cols: int) -> float:
    """Heading of the ray for screen column ``col``; column 0 is leftmost."""
    return heading - fov / 2.0 + (col / max(1, cols)) * fov


def cast_column(
    grid: Grid, ox: float, oy: float, ang: float, max_depth: float, step: float
) -> float:
    """March from (ox, oy) along ``ang`` in ``step`` increments.

    Returns the travelled distance at the first wall sample, or
    ``max_depth`` when nothing is hit in range or the ray leaves the map.
    """
    unit_x = math.cos(ang)
    unit_y = math.sin(ang)
    width = grid.width
    height = grid.height

    n = 0
    while True:
        n += 1
        dist = n * step
        if dist >= max_depth:
            return max_depth

        tx = ox + unit_x * dist
        ty = oy + unit_y * dist
        if not (0.0 <= tx < width and 0.0 <= ty < height):
            return max_depth

        if grid.cells[int(ty) * width + int(tx)]:
            return dist


def cast_frame(
    grid: Grid, player: Player, cols: int, max_depth: float, step: float
) -> list[float]:
    return [
        cast_column(
            grid,
            player.x,
            player.y,
            ray_angle(player.ang, player.fov, col, cols),
            max_depth,
            step,
        )
        for col in range(cols)
    ]


def wall_span(view_h: int, dist: float) -> tuple[int, int]:
    """Rows [ceiling, floor) covered by a wall at ``dist``."""
    ceiling = int(view_h / 2.0 - view_h / max(dist, 1e-6))
    if ceiling < 0:
        ceiling = 0
    return ceiling, view_h - ceiling
