"""Maze generation and grid helpers."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass

from .constants import MIN_SIZE
from .errors import ConfigurationError
from .models import Grid

logger = logging.getLogger(__name__)

# east, south, west, north; the carver rotates through them in this order
DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass
class Maze:
    grid: Grid
    entrance: tuple[int, int]
    exit: tuple[int, int]
    spawn: tuple[float, float]


@dataclass
class Carver:
    """Randomized carving walk over a mutable wall field.

    The walk opens a 1-step and 2-step cell pair whenever both are still
    solid, then picks a fresh direction. After four consecutive refusals
    (every direction tried from the cursor) it is finished.
    """

    cells: list[bool]
    width: int
    height: int
    rng: random.Random
    x: int
    y: int
    direction: int = 0
    failures: int = 0
    opened: int = 0

    def __post_init__(self) -> None:
        self.direction = self.rng.randrange(4)
        # A walk can only grow an existing passage.
        if self.cells[self.y * self.width + self.x]:
            self.failures = 4

    @property
    def finished(self) -> bool:
        return self.failures >= 4

    def _solid(self, x: int, y: int) -> bool:
        return self.cells[y * self.width + x]

    def step(self) -> bool:
        """Advance one transition. Returns True when cells were opened."""
        if self.finished:
            return False

        dx, dy = DIRECTIONS[self.direction]
        x1, y1 = self.x + dx, self.y + dy
        x2, y2 = x1 + dx, y1 + dy

        if (
            0 < x2 < self.width - 1
            and 0 < y2 < self.height - 1
            and self._solid(x1, y1)
            and self._solid(x2, y2)
        ):
            self.cells[y1 * self.width + x1] = False
            self.cells[y2 * self.width + x2] = False
            self.x, self.y = x2, y2
            self.direction = self.rng.randrange(4)
            self.failures = 0
            self.opened += 2
            return True

        self.direction = (self.direction + 1) % 4
        self.failures += 1
        return False

    def run(self) -> int:
        while not self.finished:
            self.step()
        return self.opened


def _last_odd(n: int) -> int:
    """Largest odd index strictly inside a border of length ``n``."""
    return n - 2 if n % 2 else n - 3


def generate_maze(width: int, height: int, rng: random.Random) -> Maze:
    if width < MIN_SIZE or height < MIN_SIZE:
        raise ConfigurationError(
            f"maze needs at least {MIN_SIZE}x{MIN_SIZE} cells, got {width}x{height}"
        )

    cells = [True] * (width * height)

    def open_cell(x: int, y: int) -> None:
        cells[y * width + x] = False

    # seed tunnel
    open_cell(1, 1)
    open_cell(1, 2)

    passes = 0
    while True:
        passes += 1
        opened = 0
        for y in range(1, height - 1, 2):
            for x in range(1, width - 1, 2):
                opened += Carver(cells, width, height, rng, x, y).run()
        if not opened:
            break

    entrance = (1, 0)
    open_cell(*entrance)

    ex = _last_odd(width)
    ly = _last_odd(height)
    for y in range(ly + 1, height):
        open_cell(ex, y)
    exit_xy = (ex, height - 1)

    grid = Grid(width=width, height=height, cells=tuple(cells))
    logger.debug("generated %dx%d maze in %d passes", width, height, passes)
    for row in grid.rows():
        logger.debug("  %s", row)

    return Maze(
        grid=grid,
        entrance=entrance,
        exit=exit_xy,
        spawn=(entrance[0] + 0.5, entrance[1] + 0.5),
    )


def reachable_cells(grid: Grid, start: tuple[int, int]) -> set[tuple[int, int]]:
    """Open cells connected to ``start`` by orthogonal steps."""
    if grid.is_wall(*start):
        return set()

    q = deque([start])
    seen = {start}
    while q:
        x, y = q.popleft()
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if (nx, ny) not in seen and not grid.is_wall(nx, ny):
                seen.add((nx, ny))
                q.append((nx, ny))
    return seen
