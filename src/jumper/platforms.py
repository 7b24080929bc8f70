# src/jumper/platforms.py
from __future__ import annotations
import logging
import random
from typing import List
from .config import (
    PLATFORM_COUNT, PLATFORM_W, PLATFORM_H, RECYCLE_Y,
    FIRST_PLATFORM_DX, FIRST_PLATFORM_DY
)
from .entities import Platform, Player

logger = logging.getLogger(__name__)


def random_x(rng: random.Random, width: float, platform_w: int = PLATFORM_W) -> float:
    """Uniform left edge keeping the whole platform inside [0, width]."""
    return rng.random() * max(0.0, width - platform_w)


def spawn_initial_platforms(player: Player, width: float, height: float,
                            rng: random.Random,
                            count: int = PLATFORM_COUNT) -> List[Platform]:
    """
    Opening layout:
    - slot 0 sits just under the spawn point so the first bounce always lands
    - slots 1..count-1 are evenly spaced from the bottom edge up, random x
    """
    platforms = [Platform(player.x + FIRST_PLATFORM_DX, player.y + FIRST_PLATFORM_DY,
                          PLATFORM_W, PLATFORM_H)]
    spacing = height / count
    for i in range(1, count):
        platforms.append(Platform(random_x(rng, width), height - i * spacing,
                                  PLATFORM_W, PLATFORM_H))
    return platforms


def recycle_platforms(platforms: List[Platform], width: float, height: float,
                      rng: random.Random) -> int:
    """
    Move every platform that scrolled off the bottom back above the top edge
    with a fresh x. Mutates in place; the list length never changes.
    Returns how many were recycled this frame.
    """
    recycled = 0
    for i, p in enumerate(platforms):
        if p.y > height:
            p.y = RECYCLE_Y
            p.x = random_x(rng, width, p.width)
            recycled += 1
            logger.debug("recycled platform %d -> x=%.1f", i, p.x)
    return recycled
