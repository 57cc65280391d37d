# -*- coding: utf-8 -*-
"""Player commands: stepping, strafing, turning and FOV changes."""
from __future__ import annotations

import math

from .constants import FOV_MAX, FOV_MIN, Command
from .models import Grid, Player, Settings
from .util import clamp, normalize_angle


def try_move(grid: Grid, player: Player, nx: float, ny: float) -> bool:
    """Move to (nx, ny) unless that cell is a wall or off the map."""
    if grid.is_wall(math.floor(nx), math.floor(ny)):
        return False
    player.x = nx
    player.y = ny
    return True


def apply_command(grid: Grid, player: Player, command: Command, settings: Settings) -> bool:
    """Advance the player by one command. Returns True on ``quit``."""
    if command == "quit":
        return True

    ca = math.cos(player.ang)
    sa = math.sin(player.ang)
    step = settings.move_step

    if command == "forward":
        try_move(grid, player, player.x + step * ca, player.y + step * sa)
    elif command == "backward":
        try_move(grid, player, player.x - step * ca, player.y - step * sa)
    elif command == "strafe_left":
        # (sin, -cos) is the heading rotated a quarter turn to the left
        try_move(grid, player, player.x + step * sa, player.y - step * ca)
    elif command == "strafe_right":
        try_move(grid, player, player.x - step * sa, player.y + step * ca)
    elif command == "turn_left":
        player.ang = normalize_angle(player.ang - settings.turn_step)
    elif command == "turn_right":
        player.ang = normalize_angle(player.ang + settings.turn_step)
    elif command == "widen_fov":
        player.fov = clamp(player.fov + settings.fov_step, FOV_MIN, FOV_MAX)
    elif command == "narrow_fov":
        player.fov = clamp(player.fov - settings.fov_step, FOV_MIN, FOV_MAX)

    return False
