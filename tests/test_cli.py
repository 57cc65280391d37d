import logging
import math

import pytest

from mazecast import cli
from mazecast.cli import parse_arguments, run, settings_from_args
from mazecast.constants import BANDS, DEFAULT_WIDTH, FOV_MAX, FOV_MIN, MAX_DEPTH, STEP
from mazecast.errors import ConfigurationError, DisplayUnavailable
from mazecast.models import Settings
from mazecast.style import init_palette


def test_defaults_map_to_settings() -> None:
    settings = settings_from_args(parse_arguments([]))
    assert settings.width == DEFAULT_WIDTH
    assert settings.max_depth == MAX_DEPTH
    assert settings.step == STEP
    assert settings.bands == BANDS
    assert settings.seed is None
    assert settings.fov == pytest.approx(math.pi / 4)
    assert settings.show_map and settings.debug
    settings.validate()


def test_flags_map_to_settings() -> None:
    args = parse_arguments(
        [
            "--width", "31",
            "--height", "15",
            "--max-depth", "12.5",
            "--step", "0.05",
            "--bands", "8",
            "--seed", "7",
            "--fov", "60",
            "--frames", "100",
            "--no-map",
            "--no-debug",
        ]
    )
    settings = settings_from_args(args)
    assert (settings.width, settings.height) == (31, 15)
    assert settings.max_depth == 12.5
    assert settings.step == 0.05
    assert settings.bands == 8
    assert settings.seed == 7
    assert settings.fov == pytest.approx(math.pi / 3)
    assert settings.frames == 100
    assert not settings.show_map
    assert not settings.debug


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 4},
        {"height": 2},
        {"max_depth": 0.0},
        {"step": -0.1},
        {"step": 30.0},
        {"move_step": 0.0},
        {"turn_step": 0.0},
        {"fov_step": 0.0},
        {"bands": 1},
        {"fov": 0.0},
        {"fov": math.pi},
        {"fov": FOV_MIN / 2},
        {"fov": FOV_MAX + 0.01},
        {"frames": -1},
    ],
)
def test_validate_rejects(kwargs: dict) -> None:
    with pytest.raises(ConfigurationError):
        Settings(**kwargs).validate()


def test_run_reports_configuration_error(monkeypatch, capsys) -> None:
    log = logging.getLogger("mazecast")
    monkeypatch.setattr(log, "handlers", [])
    monkeypatch.setattr(log, "propagate", True)

    with pytest.raises(SystemExit) as info:
        run(["--width", "3"])

    assert info.value.code == 2
    assert "mazecast: map must be at least 5x5" in capsys.readouterr().err


@pytest.mark.parametrize("fov", [FOV_MIN, FOV_MAX])
def test_validate_accepts_fov_limits(fov: float) -> None:
    Settings(fov=fov).validate()


@pytest.fixture
def quiet_logger(monkeypatch):
    log = logging.getLogger("mazecast")
    monkeypatch.setattr(log, "handlers", [])
    monkeypatch.setattr(log, "propagate", True)


def test_run_rejects_fov_narrower_than_commands_allow(quiet_logger, capsys) -> None:
    with pytest.raises(SystemExit) as info:
        run(["--fov", "3"])

    assert info.value.code == 2
    assert "fov must lie in" in capsys.readouterr().err


def test_run_reports_display_unavailable(quiet_logger, monkeypatch, capsys) -> None:
    def wrapper(func, session):
        return init_palette(session.settings.bands)

    monkeypatch.setattr(cli.curses, "has_colors", lambda: False)
    monkeypatch.setattr(cli.curses, "wrapper", wrapper)

    with pytest.raises(SystemExit) as info:
        run(["--seed", "1"])

    assert info.value.code == DisplayUnavailable.exit_code == 1
    assert "mazecast: this terminal does not support color" in capsys.readouterr().err
