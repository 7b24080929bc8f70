# src/jumper/scroll.py
from __future__ import annotations
import math
from .config import SCORE_DIVISOR
from .entities import SimState


def score_for(distance: float) -> int:
    """Metres earned for `distance` px of scroll, rounded half-up."""
    return int(math.floor(distance / SCORE_DIVISOR + 0.5))


def scroll_world(state: SimState, distance: float) -> int:
    """
    Camera follow by moving the world down instead of the player up.
    Shifts platforms and particles by `distance` and banks the score.
    Returns the score gained.
    """
    if distance < 0:
        raise ValueError(f"scroll distance must be >= 0, got {distance}")

    for platform in state.platforms:
        platform.y += distance
    for particle in state.particles:
        particle.y += distance

    gained = score_for(distance)
    state.score += gained
    return gained
