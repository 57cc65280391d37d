# -*- coding: utf-8 -*-
"""Project-wide constants and type aliases for the raycast maze."""
from __future__ import annotations

import math
from typing import Literal

# ----- Map glyphs (logging / inset) -----
WALL = "#"
OPEN = " "

# ----- Map size -----
MIN_SIZE = 5
DEFAULT_WIDTH = 23
DEFAULT_HEIGHT = 23

# ----- Raycasting -----
MAX_DEPTH = 25.0
STEP = 0.1        # march increment in grid units
BANDS = 20        # shading levels per surface

# ----- Player -----
MOVE_STEP = 0.5
TURN_STEP = math.pi / 32.0
FOV_STEP = math.pi / 32.0

FOV_DEFAULT = math.pi / 4.0  # 45°
FOV_MIN = math.pi / 32.0
FOV_MAX = math.pi - math.pi / 32.0

SPAWN_HEADING = math.pi / 2.0  # facing into the maze (south)

# ----- Inset -----
INSET_WALL = "[]"
INSET_OPEN = "  "
INSET_PLAYER = "><"

Command = Literal[
    "forward",
    "backward",
    "strafe_left",
    "strafe_right",
    "turn_left",
    "turn_right",
    "widen_fov",
    "narrow_fov",
    "toggle_map",
    "quit",
]
Surface = Literal["wall", "floor"]
