"""
bubs_world module: render/renderer.py

Pygame rendering of an engine snapshot.
"""

from __future__ import annotations
from typing import Iterable, List

import pygame

import config
from evolution.engine import Snapshot
from evolution.population import BubView
from render import colors
from world.danger import DangerZone


def draw_bubs(screen: pygame.Surface, bubs: Iterable[BubView]) -> None:
    # dead bubs are not drawn
    for b in bubs:
        if b.is_alive:
            pygame.draw.circle(screen, colors.BUB, (int(b.x), int(b.y)), config.BUB_RADIUS)


def draw_danger_zones(screen: pygame.Surface, zones: Iterable[DangerZone]) -> None:
    for z in zones:
        # alpha needs its own surface
        overlay = pygame.Surface((max(1, int(z.w)), max(1, int(z.h))), pygame.SRCALPHA)
        overlay.fill(colors.DANGER)
        screen.blit(overlay, (int(z.x), int(z.y)))


def hud_lines(snap: Snapshot) -> List[str]:
    lines = [
        f"time: {snap.time}",
        f"generation: {snap.generation}",
    ]
    if snap.generation > 1:
        lines.append(f"last generation's survival rate: {snap.survival_rate}")
    return lines


def draw_hud(screen: pygame.Surface, snap: Snapshot, ticks_per_frame: int) -> None:
    font = pygame.font.Font(None, 26)

    lines = hud_lines(snap) + [f"ticks/frame: {ticks_per_frame}"]

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.HUD_TEXT)
        screen.blit(txt, (20, y))
        y += 26


def draw_snapshot(screen: pygame.Surface, snap: Snapshot, ticks_per_frame: int) -> None:
    screen.fill(colors.BG)
    draw_bubs(screen, snap.bubs)
    draw_danger_zones(screen, snap.zones)
    draw_hud(screen, snap, ticks_per_frame)
