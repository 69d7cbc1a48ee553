"""
bubs_world module: world/world.py

World state container (bounds + the hazards active right now).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from world.danger import DangerZone, HazardSchedule, SweepingHazard


@dataclass
class World:
    w: float
    h: float
    hazards: HazardSchedule
    zones: List[DangerZone] = field(default_factory=list)

    @staticmethod
    def create(w: float, h: float, hazards: Optional[HazardSchedule] = None) -> "World":
        if w <= 0 or h <= 0:
            raise ValueError(f"world size must be positive, got {w}x{h}")
        if hazards is None:
            hazards = SweepingHazard(w, h)
        world = World(w=w, h=h, hazards=hazards)
        world.reset()
        return world

    def update(self, tick: int) -> None:
        self.zones = self.hazards.zones_at(tick)

    def reset(self) -> None:
        self.update(0)
