# -*- coding: utf-8 -*-
"""Display backend: viewport, cell painting and non-blocking input."""
from __future__ import annotations

import curses
import time
from typing import Optional, Protocol

from .constants import Command, Surface
from .style import Palette, init_palette
from .util import safe_addstr

KEYMAP: dict[int, Command] = {
    ord("w"): "forward",
    ord("W"): "forward",
    ord("s"): "backward",
    ord("S"): "backward",
    ord("a"): "strafe_left",
    ord("A"): "strafe_left",
    ord("d"): "strafe_right",
    ord("D"): "strafe_right",
    curses.KEY_LEFT: "turn_left",
    curses.KEY_RIGHT: "turn_right",
    ord("+"): "widen_fov",
    ord("="): "widen_fov",
    ord("-"): "narrow_fov",
    ord("m"): "toggle_map",
    ord("M"): "toggle_map",
    ord("q"): "quit",
    ord("Q"): "quit",
}


class Display(Protocol):
    def viewport_size(self) -> tuple[int, int]: ...

    def set_cell_color(self, row: int, col: int, surface: Surface, band: int) -> None: ...

    def fill_column(self, col: int, top: int, bottom: int, surface: Surface, band: int) -> None: ...

    def write_text(self, row: int, col: int, text: str) -> None: ...

    def poll_input(self) -> Optional[Command]: ...

    def now(self) -> float: ...

    def clear(self) -> None: ...

    def present(self) -> None: ...


class CursesDisplay:
    """Paints solid colour cells on a curses window."""

    def __init__(self, stdscr, palette: Palette) -> None:
        self.stdscr = stdscr
        self.palette = palette

    @classmethod
    def open(cls, stdscr, bands: int) -> "CursesDisplay":
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)
        curses.noecho()
        curses.cbreak()
        stdscr.nodelay(True)
        return cls(stdscr, init_palette(bands))

    def viewport_size(self) -> tuple[int, int]:
        return self.stdscr.getmaxyx()

    def set_cell_color(self, row: int, col: int, surface: Surface, band: int) -> None:
        safe_addstr(self.stdscr, row, col, " ", self.palette.attr(surface, band))

    def fill_column(self, col: int, top: int, bottom: int, surface: Surface, band: int) -> None:
        if bottom <= top:
            return
        try:
            self.stdscr.vline(top, col, " ", bottom - top, self.palette.attr(surface, band))
        except curses.error:
            pass

    def write_text(self, row: int, col: int, text: str) -> None:
        safe_addstr(self.stdscr, row, col, text, self.palette.text_attr())

    def poll_input(self) -> Optional[Command]:
        ch = self.stdscr.getch()
        if ch == -1:
            return None
        return KEYMAP.get(ch)

    def now(self) -> float:
        return time.monotonic()

    def clear(self) -> None:
        self.stdscr.erase()

    def present(self) -> None:
        self.stdscr.refresh()
