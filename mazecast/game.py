"""Session state and the main loop.

Each frame runs three phases in order:
- input: poll at most one command without blocking
- update: advance the player, regenerate the maze once the exit is reached
- render: draw the raycast view, inset and debug line
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

from .constants import SPAWN_HEADING, Command
from .display import CursesDisplay, Display
from .maze import Maze, generate_maze
from .models import Player, Settings
from .movement import apply_command
from .render import render_frame

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Everything one run of the renderer owns."""

    settings: Settings
    rng: random.Random
    maze: Maze
    player: Player

    show_map: bool = True
    level: int = 1
    frames: int = 0
    fps: float = 0.0
    last_tick: float = 0.0


def _spawn(maze: Maze, fov: float) -> Player:
    sx, sy = maze.spawn
    return Player(x=sx, y=sy, ang=SPAWN_HEADING, fov=fov)


def new_session(settings: Settings) -> Session:
    settings.validate()
    seed = settings.seed
    if seed is None:
        seed = time.time_ns()
    logger.info("maze seed %d, size %dx%d", seed, settings.width, settings.height)

    rng = random.Random(seed)
    maze = generate_maze(settings.width, settings.height, rng)
    return Session(
        settings=settings,
        rng=rng,
        maze=maze,
        player=_spawn(maze, settings.fov),
        show_map=settings.show_map,
    )


def next_level(session: Session) -> None:
    s = session.settings
    session.maze = generate_maze(s.width, s.height, session.rng)
    session.player = _spawn(session.maze, session.player.fov)
    session.level += 1


def at_exit(session: Session) -> bool:
    return session.player.cell() == session.maze.exit


def step_session(session: Session, command: Optional[Command]) -> bool:
    """Apply one polled command. Returns False once the session should end."""
    if command is None:
        return True
    if command == "toggle_map":
        session.show_map = not session.show_map
        return True
    if apply_command(session.maze.grid, session.player, command, session.settings):
        return False

    if at_exit(session):
        logger.info("level %d escaped after %d frames", session.level, session.frames)
        next_level(session)
    return True


def run_session(display: Display, session: Session) -> int:
    """Poll, update and render until quit (or the frame limit). Returns frames drawn."""
    limit = session.settings.frames
    session.last_tick = display.now()

    while True:
        if not step_session(session, display.poll_input()):
            break

        render_frame(
            display,
            session.maze.grid,
            session.player,
            session.settings,
            session.show_map,
            session.fps,
        )
        session.frames += 1

        now = display.now()
        dt = now - session.last_tick
        session.last_tick = now
        if dt > 0:
            session.fps = 1.0 / dt

        if limit and session.frames >= limit:
            break

    logger.info("session ended after %d frames on level %d", session.frames, session.level)
    return session.frames


def main(stdscr, session: Session) -> int:
    display = CursesDisplay.open(stdscr, session.settings.bands)
    return run_session(display, session)
