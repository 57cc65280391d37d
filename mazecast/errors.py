# -*- coding: utf-8 -*-
"""Exceptions raised before the session loop starts."""
from __future__ import annotations


class MazecastError(Exception):
    """Base class for fatal mazecast errors."""

    exit_code = 1


class ConfigurationError(MazecastError):
    """Invalid grid dimensions or non-positive fov/step/depth settings."""

    exit_code = 2


class DisplayUnavailable(MazecastError):
    """The terminal cannot provide a capability the renderer needs."""

    exit_code = 1
