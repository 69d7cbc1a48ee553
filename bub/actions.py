"""
bubs_world module: bub/actions.py

Turns a brain's 4 outputs into a unit move.
"""

from __future__ import annotations
import math
from enum import Enum
from typing import Sequence, Tuple


class ActionPolicy(Enum):
    """How the output vector is read."""
    THRESHOLD_PAIR = "threshold_pair"  # o0 vs o1 -> dx, o2 vs o3 -> dy
    ARGMAX = "argmax"  # strongest of left/right/up/down


class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)  # screen coordinates: y grows downwards
    DOWN = (0, 1)


class MalformedOutputError(ValueError):
    """The brain produced something that is not a 4-value decision."""


ACTION_OUTPUTS = 4


def _check(outputs: Sequence[float]) -> None:
    if len(outputs) != ACTION_OUTPUTS:
        raise MalformedOutputError(f"expected {ACTION_OUTPUTS} outputs, got {len(outputs)}")
    if any(math.isnan(v) for v in outputs):
        raise MalformedOutputError(f"NaN in outputs: {list(outputs)}")


def threshold_pair(outputs: Sequence[float]) -> Tuple[int, int]:
    dx = -1 if outputs[0] > outputs[1] else 1
    dy = -1 if outputs[2] > outputs[3] else 1
    return dx, dy


def argmax_direction(outputs: Sequence[float]) -> Direction:
    # first maximum wins, in LEFT, RIGHT, UP, DOWN order
    best = 0
    for i in range(1, ACTION_OUTPUTS):
        if outputs[i] > outputs[best]:
            best = i
    return list(Direction)[best]


def decide_move(policy: ActionPolicy, outputs: Sequence[float]) -> Tuple[int, int]:
    _check(outputs)
    if policy == ActionPolicy.THRESHOLD_PAIR:
        return threshold_pair(outputs)
    if policy == ActionPolicy.ARGMAX:
        return argmax_direction(outputs).value
    raise ValueError(f"unknown action policy: {policy!r}")
