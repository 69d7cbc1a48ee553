"""
bubs_world module: evolution/population.py

One generation of bubs.

Dead bubs stay in the list, frozen where they died, so the survival rate
is always taken over the full population size.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import config
from bub.actions import ActionPolicy
from bub.bub import Bub
from evolution.reproduction import spawn_child
from evolution.selection import FitnessPolicy, make_selector, survival_rate
from world.danger import DangerZone, in_any_zone


@dataclass(frozen=True)
class BubView:
    x: float
    y: float
    is_alive: bool


class Population:
    def __init__(self, bubs: Sequence[Bub]):
        self.bubs: Tuple[Bub, ...] = tuple(bubs)

    @staticmethod
    def create(size: int, w: float, h: float, rng: random.Random) -> "Population":
        if size < 1:
            raise ValueError(f"population size must be positive, got {size}")
        return Population([Bub.spawn(w, h, rng) for _ in range(size)])

    def __len__(self) -> int:
        return len(self.bubs)

    def update(
        self,
        zones: Sequence[DangerZone],
        w: float,
        h: float,
        max_time: int = config.MAX_TIME,
        policy: ActionPolicy = ActionPolicy.THRESHOLD_PAIR,
    ) -> None:
        for b in self.bubs:
            if not b.is_alive:
                continue
            b.update(w, h, max_time, policy)
            if in_any_zone(zones, b.x, b.y):
                b.kill()

    def alive_count(self) -> int:
        return sum(1 for b in self.bubs if b.is_alive)

    def survival_rate(self) -> int:
        return survival_rate(self.bubs)

    def spawn_next_generation(
        self,
        rng: random.Random,
        w: float,
        h: float,
        fitness_policy: FitnessPolicy = FitnessPolicy.AGE,
        elite_fraction: float = config.ELITE,
        mutation_rate: float = config.MUTATION_RATE,
        sigma: float = config.MUT_SIGMA,
    ) -> "Population":
        """
        Build the next generation from this one. This population is left
        untouched; selection errors propagate before anything is built.
        """
        selector = make_selector(fitness_policy, self.bubs, rng, elite_fraction)
        children: List[Bub] = []
        while len(children) < len(self.bubs):
            parent = selector.pick()
            children.append(spawn_child(parent, w, h, rng, mutation_rate, sigma))
        return Population(children)

    def snapshot(self) -> Tuple[BubView, ...]:
        return tuple(BubView(b.x, b.y, b.is_alive) for b in self.bubs)
