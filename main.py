"""
Bubs world: bubs learn to dodge a sweeping danger zone by generational
selection.

Keys: S faster, A slower, 0 one tick per frame, 9 max ticks per frame.
"""

from __future__ import annotations
import argparse
import logging
import random
import sys
from typing import List, Optional

import pygame

import config
from bub.actions import ActionPolicy
from evolution.engine import EvolutionEngine
from evolution.selection import FitnessPolicy, SelectionError
from render.controls import SpeedCommand, next_ticks_per_frame
from render.renderer import draw_snapshot

log = logging.getLogger("bubs_world")

SPEED_KEYS = {
    pygame.K_s: SpeedCommand.FASTER,
    pygame.K_a: SpeedCommand.SLOWER,
    pygame.K_0: SpeedCommand.MIN,
    pygame.K_9: SpeedCommand.MAX,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Evolve bubs that avoid danger zones.")
    p.add_argument("--seed", type=int, default=None, help="random seed (default: from the OS)")
    p.add_argument("--population", type=int, default=config.START_POP)
    p.add_argument("--width", type=float, default=config.SCREEN_W)
    p.add_argument("--height", type=float, default=config.SCREEN_H)
    p.add_argument(
        "--action-policy",
        choices=[a.value for a in ActionPolicy],
        default=config.ACTION_POLICY,
    )
    p.add_argument(
        "--fitness-policy",
        choices=[f.value for f in FitnessPolicy],
        default=config.FITNESS_POLICY,
    )
    p.add_argument("--headless", action="store_true", help="run without a window")
    p.add_argument("--generations", type=int, default=10, help="generations to run when headless")
    p.add_argument("--log-level", default=config.LOG_LEVEL)
    return p.parse_args(argv)


def build_engine(args: argparse.Namespace) -> EvolutionEngine:
    rng = random.Random(args.seed)
    return EvolutionEngine(
        args.width,
        args.height,
        args.population,
        rng,
        action_policy=ActionPolicy(args.action_policy),
        fitness_policy=FitnessPolicy(args.fitness_policy),
    )


def run_headless(engine: EvolutionEngine, generations: int) -> None:
    for _ in range(generations):
        gen = engine.generation
        rate = engine.run_generation()
        log.info("generation %d survival rate: %d%%", gen, rate)


def run_window(engine: EvolutionEngine) -> None:
    pygame.init()
    screen = pygame.display.set_mode((int(engine.world.w), int(engine.world.h)))
    pygame.display.set_caption("Bubs World")
    clock = pygame.time.Clock()

    ticks_per_frame = config.MIN_TICKS_PER_FRAME
    running = True

    try:
        while running:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN and e.key in SPEED_KEYS:
                    ticks_per_frame = next_ticks_per_frame(ticks_per_frame, SPEED_KEYS[e.key])

            engine.run(ticks_per_frame)

            draw_snapshot(screen, engine.snapshot(), ticks_per_frame)
            pygame.display.flip()
            clock.tick(config.FPS)
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = build_engine(args)
    try:
        if args.headless:
            run_headless(engine, args.generations)
        else:
            run_window(engine)
    except SelectionError as exc:
        log.error(
            "generation %d cannot breed (survival rate %d%%): %s",
            engine.generation,
            engine.last_survival_rate,
            exc,
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
