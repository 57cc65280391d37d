# -*- coding: utf-8 -*-
"""Small helpers used across modules."""
from __future__ import annotations

import curses
import math

TAU = 2.0 * math.pi


def safe_addstr(stdscr, y: int, x: int, s: str, attr: int = 0) -> None:
    try:
        stdscr.addstr(y, x, s, attr)
    except curses.error:
        pass


def clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def normalize_angle(a: float) -> float:
    """Wrap an angle into [0, 2π)."""
    a = math.fmod(a, TAU)
    if a < 0.0:
        a += TAU
    if a >= TAU:
        a = 0.0
    return a
