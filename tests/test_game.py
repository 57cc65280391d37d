import math

import pytest

from mazecast.errors import ConfigurationError
from mazecast.game import new_session, run_session, step_session
from mazecast.models import Settings


def test_new_session_spawns_at_entrance() -> None:
    session = new_session(Settings(width=11, height=11, seed=5))
    assert (session.player.x, session.player.y) == session.maze.spawn
    assert session.player.ang == pytest.approx(math.pi / 2)
    assert session.level == 1


def test_same_seed_same_maze() -> None:
    a = new_session(Settings(seed=99))
    b = new_session(Settings(seed=99))
    assert a.maze.grid == b.maze.grid


def test_invalid_settings_fail_before_loop() -> None:
    with pytest.raises(ConfigurationError):
        new_session(Settings(width=3))


def test_loop_stops_on_quit(fake_display) -> None:
    session = new_session(Settings(width=9, height=9, seed=1))
    display = fake_display(commands=["turn_left", None, "quit", "forward"])

    frames = run_session(display, session)

    assert frames == 2
    assert display.presents == 2
    # the command after quit is never consumed
    assert display.commands == ["forward"]
    assert session.fps > 0


def test_loop_stops_after_frame_limit(fake_display) -> None:
    session = new_session(Settings(width=9, height=9, seed=1, frames=3))
    assert run_session(fake_display(), session) == 3


def test_player_walks_into_maze(fake_display) -> None:
    session = new_session(Settings(width=9, height=9, seed=1))
    # spawn faces south from the entrance into the seed tunnel
    run_session(fake_display(commands=["forward", "forward", "quit"]), session)
    assert session.player.cell() == (1, 1)


def test_toggle_map() -> None:
    session = new_session(Settings(seed=2))
    assert session.show_map is True
    assert step_session(session, "toggle_map") is True
    assert session.show_map is False


def test_reaching_exit_starts_next_level() -> None:
    session = new_session(Settings(width=9, height=9, seed=3))
    ex, ey = session.maze.exit
    session.player.x = ex + 0.5
    session.player.y = ey + 0.5
    session.player.fov = 1.0

    assert step_session(session, "turn_left") is True

    assert session.level == 2
    assert (session.player.x, session.player.y) == session.maze.spawn
    assert session.player.fov == 1.0
