"""
bubs_world module: evolution/engine.py

Generational loop:
- one ``step()`` is one simulation tick
- when the tick budget runs out the population is scored, bred and
  replaced in one swap, and the hazards go back to their tick-0 layout
- all randomness comes from the ``rng`` handed in at construction
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

import config
from bub.actions import ActionPolicy
from evolution.population import BubView, Population
from evolution.selection import FitnessPolicy
from world.danger import DangerZone, HazardSchedule
from world.world import World

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view for renderers and stats."""
    bubs: Tuple[BubView, ...]
    zones: Tuple[DangerZone, ...]
    time: int
    generation: int
    survival_rate: int


class EvolutionEngine:
    def __init__(
        self,
        w: float,
        h: float,
        population_size: int,
        rng: random.Random,
        *,
        max_time: int = config.MAX_TIME,
        elite_fraction: float = config.ELITE,
        mutation_rate: float = config.MUTATION_RATE,
        mutation_sigma: float = config.MUT_SIGMA,
        action_policy: ActionPolicy = ActionPolicy(config.ACTION_POLICY),
        fitness_policy: FitnessPolicy = FitnessPolicy(config.FITNESS_POLICY),
        hazards: Optional[HazardSchedule] = None,
    ):
        if max_time < 1:
            raise ValueError(f"max_time must be at least 1, got {max_time}")
        self.rng = rng
        self.world = World.create(w, h, hazards)
        self.population = Population.create(population_size, w, h, rng)

        self.max_time = max_time
        self.elite_fraction = elite_fraction
        self.mutation_rate = mutation_rate
        self.mutation_sigma = mutation_sigma
        self.action_policy = action_policy
        self.fitness_policy = fitness_policy

        self.time = 0
        self.generation = 1
        self.last_survival_rate = 0

    @property
    def zones(self) -> Tuple[DangerZone, ...]:
        return tuple(self.world.zones)

    def step(self) -> None:
        if self.time >= self.max_time:
            self.rollover()

        self.world.update(self.time)
        self.population.update(
            self.world.zones,
            self.world.w,
            self.world.h,
            self.max_time,
            self.action_policy,
        )
        self.time += 1

    def run(self, ticks: int) -> None:
        for _ in range(ticks):
            self.step()

    def run_generation(self) -> int:
        """Tick to the end of the current generation, roll over, return its survival rate."""
        while self.time < self.max_time:
            self.step()
        self.rollover()
        return self.last_survival_rate

    def rollover(self) -> None:
        self.last_survival_rate = self.population.survival_rate()
        log.info(
            "generation %d done: %d/%d alive (%d%%)",
            self.generation,
            self.population.alive_count(),
            len(self.population),
            self.last_survival_rate,
        )
        # population, clock and zones only change once the next generation is built
        next_population = self.population.spawn_next_generation(
            self.rng,
            self.world.w,
            self.world.h,
            fitness_policy=self.fitness_policy,
            elite_fraction=self.elite_fraction,
            mutation_rate=self.mutation_rate,
            sigma=self.mutation_sigma,
        )

        self.population = next_population
        self.world.reset()
        self.time = 0
        self.generation += 1

    def snapshot(self) -> Snapshot:
        return Snapshot(
            bubs=self.population.snapshot(),
            zones=self.zones,
            time=self.time,
            generation=self.generation,
            survival_rate=self.last_survival_rate,
        )
