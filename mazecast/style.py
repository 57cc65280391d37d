"""Terminal colour palette: shading band -> curses attribute."""

from __future__ import annotations

import curses
import logging
from dataclasses import dataclass
from typing import Literal

from .constants import Surface
from .errors import DisplayUnavailable

logger = logging.getLogger(__name__)

# first colour slot redefined in "custom" mode; 0-15 stay the terminal's own
CUSTOM_COLOR_START = 16

# xterm-256 ramps: black + 24 grays for walls, black + green cube steps for floors
XTERM_WALL_RAMP = [16] + list(range(232, 256))
XTERM_FLOOR_RAMP = [16, 22, 28, 34, 40, 46]

PaletteMode = Literal["custom", "256", "basic"]


@dataclass
class Palette:
    mode: PaletteMode
    wall_pairs: list[int]
    floor_pairs: list[int]
    text_pair: int

    def attr(self, surface: Surface, band: int) -> int:
        pairs = self.wall_pairs if surface == "wall" else self.floor_pairs
        band = min(max(band, 0), len(pairs) - 1)
        return curses.color_pair(pairs[band])

    def text_attr(self) -> int:
        return curses.color_pair(self.text_pair)


def ramp_pick(ramp: list[int], band: int, bands: int) -> int:
    """Spread ``bands`` levels evenly over a fixed colour ramp."""
    return ramp[int(band * (len(ramp) - 1) / max(1, bands - 1))]


def _init_pair(pid: int, fg: int, bg: int) -> None:
    try:
        curses.init_pair(pid, fg, bg)
    except curses.error as exc:
        raise DisplayUnavailable(f"cannot define colour pair {pid}") from exc


def _init_color(cid: int, r: int, g: int, b: int) -> None:
    try:
        curses.init_color(cid, r, g, b)
    except curses.error as exc:
        raise DisplayUnavailable(f"cannot redefine colour {cid}") from exc


def init_palette(bands: int) -> Palette:
    """Start curses colours and define one solid pair per band and surface."""
    if not curses.has_colors():
        raise DisplayUnavailable("this terminal does not support color")

    try:
        curses.start_color()
    except curses.error as exc:
        raise DisplayUnavailable("could not start color mode") from exc
    try:
        curses.use_default_colors()
    except Exception:
        pass

    colors = getattr(curses, "COLORS", 0) or 0
    pairs = getattr(curses, "COLOR_PAIRS", 0) or 0
    # pair 0 is reserved, then one per band and surface, then the text pair
    pairs_needed = 2 * bands + 2
    if pairs < pairs_needed:
        raise DisplayUnavailable(
            f"terminal offers {pairs} colour pairs, {pairs_needed} needed for {bands} bands"
        )

    mode: PaletteMode
    if curses.can_change_color() and colors >= CUSTOM_COLOR_START + 2 * bands:
        mode = "custom"
    elif colors >= 256:
        mode = "256"
    else:
        mode = "basic"

    wall_colors: list[int] = []
    floor_colors: list[int] = []
    if mode == "custom":
        for i in range(bands):
            cid = CUSTOM_COLOR_START + i
            shade = int(800 * i / bands)
            _init_color(cid, shade, shade, shade)
            wall_colors.append(cid)
        for i in range(bands):
            cid = CUSTOM_COLOR_START + bands + i
            _init_color(cid, 0, int(600 * i / bands), 0)
            floor_colors.append(cid)
    elif mode == "256":
        wall_colors = [ramp_pick(XTERM_WALL_RAMP, i, bands) for i in range(bands)]
        floor_colors = [ramp_pick(XTERM_FLOOR_RAMP, i, bands) for i in range(bands)]
    else:
        basic_wall = [curses.COLOR_BLACK, curses.COLOR_BLUE, curses.COLOR_CYAN, curses.COLOR_WHITE]
        basic_floor = [curses.COLOR_BLACK, curses.COLOR_GREEN]
        wall_colors = [ramp_pick(basic_wall, i, bands) for i in range(bands)]
        floor_colors = [ramp_pick(basic_floor, i, bands) for i in range(bands)]

    pid = 1
    wall_pairs: list[int] = []
    floor_pairs: list[int] = []
    for c in wall_colors:
        _init_pair(pid, c, c)
        wall_pairs.append(pid)
        pid += 1
    for c in floor_colors:
        _init_pair(pid, c, c)
        floor_pairs.append(pid)
        pid += 1
    text_pair = pid
    _init_pair(text_pair, curses.COLOR_WHITE, curses.COLOR_BLACK)

    logger.info("palette: %s mode, %d colours, %d pairs used", mode, colors, pid)
    return Palette(mode=mode, wall_pairs=wall_pairs, floor_pairs=floor_pairs, text_pair=text_pair)
