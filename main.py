#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Raycast maze in the terminal.

Controls:
- W/S   forward / backward
- A/D   strafe left / right
- ←/→   turn
- +/-   widen / narrow field of view
- M     toggle the map inset
- Q     quit

Run:
  python3 main.py --seed 42
"""

from mazecast.cli import run

if __name__ == "__main__":
    run()
