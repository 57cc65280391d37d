# -*- coding: utf-8 -*-
"""Distance/row quantization into shading bands.

Band 0 is the darkest level and ``bands - 1`` the brightest. The palette
that turns a band into an actual terminal colour lives in :mod:`style`.
"""
from __future__ import annotations

from .util import clamp


def wall_band(dist: float, max_depth: float, bands: int) -> int:
    """Reciprocal banding: band ``i`` covers distances below ``max_depth / i``.

    Near walls get most of the levels; anything at or past ``max_depth``
    (including escaped rays) is band 0.
    """
    if dist >= max_depth:
        return 0
    for i in range(bands - 1, 0, -1):
        if dist < max_depth / i:
            return i
    return 0


def floor_band(row: int, view_h: int, bands: int) -> int:
    """Brightest at the bottom row, darkest at the horizon."""
    half = view_h / 2.0
    if half <= 0:
        return 0
    b = clamp((row - half) / half, 0.0, 1.0)
    return int(b * (bands - 1))
