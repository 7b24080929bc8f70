# src/jumper/controls.py
from __future__ import annotations
from .config import MAX_STEER


def steer_from_pointer(pointer_x: float, surface_left: float, surface_width: float,
                       max_speed: float = MAX_STEER) -> float:
    """
    Pointer offset from the surface centre, scaled so the edges give
    +/- max_speed. Pointers outside the surface are clamped.
    """
    if surface_width <= 0:
        return 0.0
    half = surface_width / 2
    centre = surface_left + half
    move = (pointer_x - centre) / half
    move = max(-1.0, min(1.0, move))
    return move * max_speed


def steer_from_keys(left: bool, right: bool, max_speed: float = MAX_STEER) -> float:
    """Digital steering: both or neither pressed means no steer."""
    return (float(right) - float(left)) * max_speed
