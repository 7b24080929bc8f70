# src/jumper/collision.py
from __future__ import annotations
from typing import List
from .config import JUMP_STRENGTH
from .entities import Platform, Player


def lands_on(player: Player, platform: Platform, fall_speed: float) -> bool:
    """
    AABB overlap on x plus a swept window on y: the feet must be below the
    platform top but no deeper than its thickness plus this frame's fall.
    x is not swept, so a very fast sideways pass can still skip a platform.
    """
    if not (player.x < platform.x + platform.width and player.x + player.width > platform.x):
        return False
    feet = player.y + player.height
    return platform.y < feet < platform.y + platform.height + fall_speed


def resolve_bounces(player: Player, platforms: List[Platform],
                    jump_strength: float = JUMP_STRENGTH) -> List[int]:
    """
    Falling-only bounce. Every platform is tested against the fall speed the
    player had when the scan started; each contact overwrites vy with the
    same jump value. Returns the indices of the platforms that were hit.
    """
    if player.vy <= 0:
        return []

    fall_speed = player.vy
    hits: List[int] = []
    for i, platform in enumerate(platforms):
        if lands_on(player, platform, fall_speed):
            player.vy = jump_strength
            hits.append(i)
    return hits
