"""
bubs_world module: world/danger.py

Danger zones: lethal axis-aligned rectangles.

Hazard schedules decide which zones exist at a given tick. A schedule is
a pure function of the tick count, so a generation always replays the
same hazard geography for the same world size.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Protocol, Sequence

import config


@dataclass(frozen=True)
class DangerZone:
    x: float
    y: float
    w: float
    h: float

    def contains(self, px: float, py: float) -> bool:
        # edges count as inside
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


class HazardSchedule(Protocol):
    def zones_at(self, tick: int) -> List[DangerZone]:
        ...


class NoHazards:
    def zones_at(self, tick: int) -> List[DangerZone]:
        return []


class StaticHazards:
    """The same zones for the whole generation, present from tick 0."""

    def __init__(self, zones: Sequence[DangerZone]):
        self.zones = tuple(zones)

    def zones_at(self, tick: int) -> List[DangerZone]:
        return list(self.zones)


class SweepingHazard:
    """
    One zone that appears in the top-left corner at ``start`` and then
    travels clockwise along the world border: right, down, left, up,
    ``leg`` ticks per side. After the lap it keeps climbing at the same
    speed and slides off the top edge.
    """

    def __init__(
        self,
        w: float,
        h: float,
        start: int = config.HAZARD_START,
        leg: int = config.HAZARD_LEG,
        scale: float = config.HAZARD_SCALE,
    ):
        if leg < 1:
            raise ValueError("leg must be at least one tick")
        self.zone_w = w * scale
        self.zone_h = h * scale
        self.span_x = w - self.zone_w
        self.span_y = h - self.zone_h
        self.start = start
        self.leg = leg

    def zones_at(self, tick: int) -> List[DangerZone]:
        if tick < self.start:
            return []

        progress = (tick - self.start) / self.leg
        side = min(int(progress), 3)  # the up leg has no end
        frac = progress - side

        if side == 0:
            x, y = frac * self.span_x, 0.0
        elif side == 1:
            x, y = self.span_x, frac * self.span_y
        elif side == 2:
            x, y = (1.0 - frac) * self.span_x, self.span_y
        else:
            x, y = 0.0, (1.0 - frac) * self.span_y

        return [DangerZone(x, y, self.zone_w, self.zone_h)]


def in_any_zone(zones: Sequence[DangerZone], x: float, y: float) -> bool:
    return any(z.contains(x, y) for z in zones)
