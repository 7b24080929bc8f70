# src/env/observations.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np

from src.jumper.config import FALL_MARGIN, MAX_STEER, PLAYER_W
from src.jumper.entities import SimState

N_PLATFORM_PROBES = 3   # nearest platforms below the player's feet
MAX_VY = 20.0           # |vy| used for normalization (falls can exceed the jump speed)

OBS_SIZE = 4 + 2 * N_PLATFORM_PROBES
OBS_LOW = np.array([0.0, 0.0, -1.0, -1.0] + [-1.0, 0.0] * N_PLATFORM_PROBES, dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0, 1.0] + [1.0, 1.0] * N_PLATFORM_PROBES, dtype=np.float32)


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)


def _platforms_below(sim: SimState, k: int) -> List[Tuple[float, float]]:
    """(dx, dy) in pixels to the k closest platform tops at or below the feet."""
    p = sim.player
    cx = p.x + p.width / 2
    feet = p.y + p.height
    found = []
    for plat in sim.platforms:
        dy = plat.y - feet
        if dy >= 0:
            found.append((plat.x + plat.width / 2 - cx, dy))
    found.sort(key=lambda t: t[1])
    return found[:k]


def build_observation(sim: SimState, n_probes: int = N_PLATFORM_PROBES) -> np.ndarray:
    """
    Returns a fixed (4 + 2*n_probes,) float32 vector:
      [ x_norm, y_norm, vx_norm, vy_norm,
        dx@1, dy@1, dx@2, dy@2, dx@3, dy@3 ]
    - x_norm, y_norm in [0,1]   (y normalized over the whole playable depth)
    - vx_norm, vy_norm in [-1,1]
    - dx in [-1,1] (fraction of viewport width), dy in [0,1] (fraction of height)
      sentinel for a missing platform: dx=0.0, dy=1.0
    """
    p = sim.player
    feats: List[float] = [
        _clamp((p.x + PLAYER_W) / (sim.width + PLAYER_W), 0.0, 1.0),
        _clamp(p.y / (sim.height + FALL_MARGIN), 0.0, 1.0),
        _clamp(p.vx / MAX_STEER, -1.0, 1.0),
        _clamp(p.vy / MAX_VY, -1.0, 1.0),
    ]

    below = _platforms_below(sim, n_probes)
    for i in range(n_probes):
        if i < len(below):
            dx, dy = below[i]
            feats.extend([_clamp(dx / sim.width, -1.0, 1.0), _clamp(dy / sim.height, 0.0, 1.0)])
        else:
            feats.extend([0.0, 1.0])

    return np.asarray(feats, dtype=np.float32)
