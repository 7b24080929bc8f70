# src/jumper/physics.py
from __future__ import annotations
from typing import List
from .config import GRAVITY, FALL_MARGIN, PARTICLE_GRAVITY
from .entities import Particle, Player, SimState
from .scroll import scroll_world


def integrate(player: Player, gravity: float = GRAVITY):
    """Semi-implicit Euler, one frame: velocity first, then position."""
    player.vy += gravity
    player.y += player.vy
    player.x += player.vx


def wrap_horizontal(player: Player, width: float):
    """Toroidal x: leaving fully on one side re-enters on the other. Velocity untouched."""
    if player.x + player.width < 0:
        player.x = width
    elif player.x > width:
        player.x = -player.width


def step_player(state: SimState, gravity: float = GRAVITY) -> bool:
    """
    Advance the player one frame, scroll the world when it climbs above the
    threshold, and report whether it fell out of play (True = game over).
    """
    player = state.player
    integrate(player, gravity)
    wrap_horizontal(player, state.width)

    threshold = state.scroll_threshold
    if player.y < threshold:
        scroll_world(state, threshold - player.y)
        player.y = threshold

    return player.y > state.height + FALL_MARGIN


def step_particles(particles: List[Particle]) -> List[Particle]:
    """Move and age bounce sparks in place; dead ones are dropped."""
    for p in particles:
        p.vy += PARTICLE_GRAVITY
        p.x += p.vx
        p.y += p.vy
        p.life -= 1
    particles[:] = [p for p in particles if p.alive]
    return particles
