# -*- coding: utf-8 -*-
"""Command line entry point."""
from __future__ import annotations

import argparse
import curses
import locale
import logging
import math
import sys
from typing import Optional, Sequence

from .constants import BANDS, DEFAULT_HEIGHT, DEFAULT_WIDTH, FOV_DEFAULT, MAX_DEPTH, STEP
from .errors import MazecastError
from .game import main, new_session
from .models import Settings

logger = logging.getLogger("mazecast")


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mazecast", description="First-person raycast view of a random maze in your terminal"
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help=f"Maze columns, odd works best (default: {DEFAULT_WIDTH})")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help=f"Maze rows, odd works best (default: {DEFAULT_HEIGHT})")
    parser.add_argument("--max-depth", type=float, default=MAX_DEPTH, help=f"Farthest distance a ray marches (default: {MAX_DEPTH:g})")
    parser.add_argument("--step", type=float, default=STEP, help=f"Ray march increment; larger is faster but blockier (default: {STEP:g})")
    parser.add_argument("--bands", type=int, default=BANDS, help=f"Number of shading levels (default: {BANDS})")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible maze (default: wall clock)")
    parser.add_argument(
        "--fov",
        type=float,
        default=math.degrees(FOV_DEFAULT),
        help=f"Field of view in degrees (default: {math.degrees(FOV_DEFAULT):g})",
    )
    parser.add_argument("--frames", type=int, default=0, help="Stop after this many frames (0 = until q)")
    parser.add_argument("--no-map", action="store_true", help="Start with the map inset hidden")
    parser.add_argument("--no-debug", action="store_true", help="Hide the angle/position/fps line")
    parser.add_argument("--log-file", default=None, help="Write log records to this file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for --log-file (default: INFO)",
    )
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> Settings:
    return Settings(
        width=args.width,
        height=args.height,
        max_depth=args.max_depth,
        step=args.step,
        bands=args.bands,
        seed=args.seed,
        fov=math.radians(args.fov),
        show_map=not args.no_map,
        debug=not args.no_debug,
        frames=args.frames,
    )


def configure_logging(log_file: Optional[str], level: str) -> None:
    # curses owns the terminal, so records only ever go to a file
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, level),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    else:
        logger.addHandler(logging.NullHandler())
        logger.propagate = False


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_arguments(argv)
    configure_logging(args.log_file, args.log_level)

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    try:
        settings = settings_from_args(args).validate()
        logger.info("settings: %s", settings)
        session = new_session(settings)
        curses.wrapper(main, session)
    except MazecastError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        print(f"mazecast: {exc}", file=sys.stderr)
        raise SystemExit(exc.exit_code) from exc
