# -*- coding: utf-8 -*-
"""Frame rendering: raycast view, map inset and debug line."""
from __future__ import annotations

from .constants import INSET_OPEN, INSET_PLAYER, INSET_WALL
from .display import Display
from .models import Grid, Player, Settings
from .raycast import cast_frame, wall_span
from .shade import floor_band, wall_band


def render_view(display: Display, grid: Grid, player: Player, settings: Settings) -> None:
    rows, cols = display.viewport_size()
    dists = cast_frame(grid, player, cols, settings.max_depth, settings.step)

    for col, dist in enumerate(dists):
        ceiling, floor = wall_span(rows, dist)
        display.fill_column(
            col, ceiling, floor, "wall", wall_band(dist, settings.max_depth, settings.bands)
        )
        for row in range(floor, rows):
            display.set_cell_color(row, col, "floor", floor_band(row, rows, settings.bands))


def inset_layout(grid: Grid, rows: int, cols: int) -> tuple[int, int, int]:
    """Return (cells across, cells down, left column) for the map inset.

    The inset takes at most half the viewport width (two characters per
    cell) and leaves the bottom row free for the debug line.
    """
    out_w = max(1, min(grid.width, (cols // 2) // 2))
    out_h = max(1, min(grid.height, rows - 1))
    left = max(0, cols - 1 - 2 * out_w)
    return out_w, out_h, left


def render_inset(display: Display, grid: Grid, player: Player) -> None:
    rows, cols = display.viewport_size()
    out_w, out_h, left = inset_layout(grid, rows, cols)
    scale_x = grid.width / out_w
    scale_y = grid.height / out_h

    for oy in range(out_h):
        my = int(oy * scale_y)
        line = "".join(
            INSET_WALL if grid.is_wall(int(ox * scale_x), my) else INSET_OPEN
            for ox in range(out_w)
        )
        display.write_text(oy, left, line)

    px, py = player.cell()
    ox_p = int(px / scale_x)
    oy_p = int(py / scale_y)
    if 0 <= ox_p < out_w and 0 <= oy_p < out_h:
        display.write_text(oy_p, left + 2 * ox_p, INSET_PLAYER)


def debug_line(player: Player, fps: float, rows: int, cols: int) -> str:
    return (
        f"Angle: {player.ang:.3f} X: {player.x:f} Y: {player.y:f} "
        f"FOV: {player.fov:f} Fps: {int(fps)} Cols: {cols}, Rows: {rows}"
    )


def render_frame(
    display: Display,
    grid: Grid,
    player: Player,
    settings: Settings,
    show_map: bool,
    fps: float,
) -> None:
    display.clear()
    render_view(display, grid, player, settings)
    if show_map:
        render_inset(display, grid, player)
    if settings.debug:
        rows, cols = display.viewport_size()
        line = debug_line(player, fps, rows, cols)
        display.write_text(rows - 1, 0, line[: max(0, cols - 1)].ljust(max(0, cols - 1)))
    display.present()
