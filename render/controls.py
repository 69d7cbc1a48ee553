"""
bubs_world module: render/controls.py

Ticks-per-frame throttle. Only changes how many ticks run between two
rendered frames, never what a tick does.
"""

from __future__ import annotations
from enum import Enum

import config
from world.physics import clamp


class SpeedCommand(Enum):
    FASTER = 0
    SLOWER = 1
    MIN = 2
    MAX = 3


def next_ticks_per_frame(
    current: int,
    command: SpeedCommand,
    lo: int = config.MIN_TICKS_PER_FRAME,
    hi: int = config.MAX_TICKS_PER_FRAME,
) -> int:
    if command == SpeedCommand.FASTER:
        current += 1
    elif command == SpeedCommand.SLOWER:
        current -= 1
    elif command == SpeedCommand.MIN:
        current = lo
    elif command == SpeedCommand.MAX:
        current = hi
    return int(clamp(current, lo, hi))
