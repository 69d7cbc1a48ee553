"""
bubs_world module: bub/bub.py

A bub: a point on the plane driven by its own feedforward brain.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

import config
from bub.actions import ActionPolicy, decide_move
from neural.network import FeedforwardNetwork
from world.physics import clamp, clamp_to_world


def new_brain(rng: Optional[random.Random] = None) -> FeedforwardNetwork:
    return FeedforwardNetwork(config.NN_INPUTS, config.NN_HIDDEN, config.NN_OUTPUTS, rng)


@dataclass
class Bub:
    x: float
    y: float
    brain: FeedforwardNetwork
    is_alive: bool = True
    age: int = 0

    @staticmethod
    def spawn(
        w: float,
        h: float,
        rng: random.Random,
        brain: Optional[FeedforwardNetwork] = None,
    ) -> "Bub":
        x = rng.uniform(0.0, w)
        y = rng.uniform(0.0, h)
        if brain is None:
            brain = new_brain(rng)
        x, y = clamp_to_world(x, y, w, h)
        return Bub(x=x, y=y, brain=brain)

    def sense(self, w: float, h: float, max_time: int) -> List[float]:
        """
        Brain inputs, all mapped into [0, 1]: x / w, y / h, age / max_time.
        """
        return [
            clamp(self.x / w, 0.0, 1.0),
            clamp(self.y / h, 0.0, 1.0),
            clamp(self.age / max_time, 0.0, 1.0),
        ]

    def act(
        self,
        outputs: Sequence[float],
        policy: ActionPolicy,
        w: float,
        h: float,
        step: float = config.STEP_SIZE,
    ) -> None:
        dx, dy = decide_move(policy, outputs)
        self.x, self.y = clamp_to_world(self.x + dx * step, self.y + dy * step, w, h)

    def update(self, w: float, h: float, max_time: int, policy: ActionPolicy) -> None:
        if not self.is_alive:
            return
        inputs = self.sense(w, h, max_time)
        self.age += 1
        self.act(self.brain.predict(inputs), policy, w, h)

    def kill(self) -> None:
        self.is_alive = False
