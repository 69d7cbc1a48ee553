"""
bubs_world module: evolution/reproduction.py

Mutation-only reproduction: a child is a fresh bub carrying a mutated
clone of its parent's brain.
"""

from __future__ import annotations
import random

import config
from bub.bub import Bub


def spawn_child(
    parent: Bub,
    w: float,
    h: float,
    rng: random.Random,
    mutation_rate: float = config.MUTATION_RATE,
    sigma: float = config.MUT_SIGMA,
) -> Bub:
    child_brain = parent.brain.clone()
    child_brain.mutate(rng, mutation_rate, sigma=sigma)
    return Bub.spawn(w, h, rng, brain=child_brain)
