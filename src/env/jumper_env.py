# src/env/jumper_env.py
from __future__ import annotations
import random
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.jumper.config import WIDTH, HEIGHT, FPS, MAX_STEER
from src.jumper.entities import GameState
from src.jumper.render import draw_frame
from src.jumper.simulation import Simulation
from src.env.observations import build_observation, OBS_LOW, OBS_HIGH


class JumperEnv(gym.Env):
    """
    Neon Jump Gymnasium environment (vector observations).
    - One simulation frame = one physics tick (60 Hz reference).
    - Agent acts every `frame_skip` frames (default 2) -> 30 decisions/sec.
    - Actions: 0 = steer left, 1 = no steer, 2 = steer right.
    - Observation: see observations.build_observation, float32.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    STEER = (-MAX_STEER, 0.0, MAX_STEER)

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 2,
                 width: int = WIDTH,
                 height: int = HEIGHT,
                 max_frames: Optional[int] = 60 * 60,
                 alive_bonus: float = 0.01):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.width = int(width)
        self.height = int(height)
        self.max_frames = max_frames
        self.alive_bonus = float(alive_bonus)

        self.action_space = gym.spaces.Discrete(3)
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.sim: Optional[Simulation] = None
        self.current_seed: Optional[int] = None
        self._seed_rng: Optional[random.Random] = None
        self.timestep: int = 0

        # Rendering
        self.screen = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Explicit seed -> that exact layout and a reseeded episode chain;
        # otherwise the next seed of the chain (np_random is left untouched)
        if seed is not None:
            self._seed_rng = random.Random(seed)
            level_seed = int(seed)
        else:
            if self._seed_rng is None:
                self._seed_rng = random.Random()
            level_seed = self._seed_rng.randrange(0, 2**31 - 1)

        self.sim = Simulation(seed=level_seed)
        self.sim.initialize(self.width, self.height)
        self.sim.start()
        self.current_seed = level_seed
        self.timestep = 0

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), {"seed": self.current_seed, "score": 0}

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.sim is not None, "call reset() before step()"

        self.sim.set_horizontal_velocity(self.STEER[int(action)])
        score_before = self.sim.score
        bounces = 0

        for _ in range(self.frame_skip):
            result = self.sim.tick()
            bounces += int(result.bounced)
            if not self.sim.running:
                break

        self.timestep += 1
        terminated = self.sim.state is GameState.GAME_OVER
        truncated = False
        if (self.max_frames is not None) and (self.sim.sim.frame >= self.max_frames) and not terminated:
            truncated = True

        if terminated:
            reward = -1.0
        else:
            reward = float(self.sim.score - score_before) + self.alive_bonus

        info = {
            "score": self.sim.score,
            "frame": self.sim.sim.frame,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "bounces": bounces,
        }

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.sim is not None and self.sim.sim is not None
        return build_observation(self.sim.sim)

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.sim is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((self.width, self.height))
                pygame.display.set_caption("Neon Jump — Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((self.width, self.height))

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()

        draw_frame(self.screen, self.sim.snapshot())

        if self.render_mode == "human":
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", FPS))
            return None

        # rgb_array: (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
