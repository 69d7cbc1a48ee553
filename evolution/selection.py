"""
bubs_world module: evolution/selection.py

Fitness policies and parent selection.

- AGE: sort by ticks survived, keep the top ``elite_fraction`` as the
  breeding pool, then roulette-wheel sample proportional to age.
- LIVENESS: every bub still alive at the boundary is an equal candidate;
  parents are drawn uniformly with replacement.
"""

from __future__ import annotations
import logging
import math
import random
from enum import Enum
from typing import List, Optional, Sequence

from bub.bub import Bub

log = logging.getLogger(__name__)


class FitnessPolicy(Enum):
    AGE = "age"
    LIVENESS = "liveness"


class SelectionError(RuntimeError):
    """Selection cannot produce a parent."""


class EmptyBreedingPoolError(SelectionError):
    """There is nobody to breed from."""


class ZeroFitnessError(EmptyBreedingPoolError):
    """The breeding pool exists but its total fitness is zero."""


def survival_rate(bubs: Sequence[Bub]) -> int:
    """Percentage (0-100, truncated) of bubs still alive."""
    if not bubs:
        return 0
    alive = sum(1 for b in bubs if b.is_alive)
    return int(100.0 * alive / len(bubs))


def select_elite(bubs: Sequence[Bub], elite_fraction: float) -> List[Bub]:
    """Longest-lived ``ceil(elite_fraction * n)`` bubs (at least one), oldest first."""
    if not 0.0 < elite_fraction <= 1.0:
        raise ValueError(f"elite_fraction must be in (0, 1], got {elite_fraction}")
    if not bubs:
        raise EmptyBreedingPoolError("population is empty")
    ranked = sorted(bubs, key=lambda b: b.age, reverse=True)
    # round off float noise first: 0.07 * 100 is 7.000000000000001
    keep = max(1, math.ceil(round(elite_fraction * len(ranked), 9)))
    return ranked[:keep]


def roulette_pick(pool: Sequence[Bub], rng: random.Random, total: Optional[float] = None) -> Bub:
    """
    Fitness-proportionate pick: draw r in [0, total) and return the first
    bub whose running age sum exceeds r.
    """
    if total is None:
        total = float(sum(b.age for b in pool))
    if total <= 0:
        raise ZeroFitnessError("breeding pool has zero total age")

    r = rng.uniform(0.0, total)
    while r >= total:
        r = rng.uniform(0.0, total)

    running = 0.0
    for b in pool:
        running += b.age
        if running > r:
            return b
    # float summation drift; the last bub with any fitness owns the remainder
    return next(b for b in reversed(pool) if b.age > 0)


class AgeSelector:
    def __init__(self, bubs: Sequence[Bub], rng: random.Random, elite_fraction: float):
        self.rng = rng
        self.pool = select_elite(bubs, elite_fraction)
        self.total = float(sum(b.age for b in self.pool))
        if self.total <= 0:
            raise ZeroFitnessError(
                f"elite pool of {len(self.pool)} has zero total age"
            )
        log.debug("elite pool: %d bubs, ages %s", len(self.pool), [b.age for b in self.pool])

    def pick(self) -> Bub:
        return roulette_pick(self.pool, self.rng, self.total)


class LivenessSelector:
    def __init__(self, bubs: Sequence[Bub], rng: random.Random):
        self.rng = rng
        self.pool = [b for b in bubs if b.is_alive]
        if not self.pool:
            raise EmptyBreedingPoolError(f"no survivors among {len(bubs)} bubs")
        rng.shuffle(self.pool)
        log.debug("survivor pool: %d bubs", len(self.pool))

    def pick(self) -> Bub:
        return self.rng.choice(self.pool)


def make_selector(
    policy: FitnessPolicy,
    bubs: Sequence[Bub],
    rng: random.Random,
    elite_fraction: float,
):
    if policy == FitnessPolicy.AGE:
        return AgeSelector(bubs, rng, elite_fraction)
    if policy == FitnessPolicy.LIVENESS:
        return LivenessSelector(bubs, rng)
    raise ValueError(f"unknown fitness policy: {policy!r}")
