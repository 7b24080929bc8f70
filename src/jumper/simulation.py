# src/jumper/simulation.py
from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple
import pygame
from .config import (
    GRAVITY, JUMP_STRENGTH, MAX_STEER, PLATFORM_COUNT, PLAYER_W, PLAYER_H,
    START_OFFSET, PARTICLES_PER_BOUNCE, PARTICLE_LIFE, PARTICLE_SPEED
)
from .collision import resolve_bounces
from .entities import GameState, Particle, Player, SimState
from .errors import InvariantError, NotInitializedError, ViewportError
from .physics import step_particles, step_player
from .platforms import recycle_platforms, spawn_initial_platforms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    state: GameState
    score: int
    bounced: bool = False
    recycled: int = 0


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer after each tick."""
    width: float
    height: float
    player: pygame.Rect
    platforms: Tuple[pygame.Rect, ...]
    particles: Tuple[Tuple[float, float, int], ...]   # (x, y, life)
    score: int
    state: GameState


class Simulation:
    """
    One game of Neon Jump, frame-driven.

    The caller supplies a viewport, calls start(), then tick() once per frame
    while `running` is True. Steering comes in through set_horizontal_velocity()
    at any time between ticks.
    """
    def __init__(self, seed: Optional[int] = None, gravity: float = GRAVITY,
                 jump_strength: float = JUMP_STRENGTH):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self._fx_rng = random.Random(seed ^ 0x5EED)   # particles never perturb the layout
        self.gravity = gravity
        self.jump_strength = jump_strength
        self.viewport: Optional[Tuple[float, float]] = None
        self.sim: Optional[SimState] = None

    # -------------------- Viewport --------------------

    def initialize(self, width: float, height: float):
        """Record the drawing-surface size. Nothing is built until start()."""
        if not width or not height or width <= 0 or height <= 0:
            logger.warning("deferring initialization: viewport %sx%s", width, height)
            raise ViewportError(width, height)
        self.viewport = (float(width), float(height))
        logger.debug("viewport set to %dx%d", width, height)

    def resize(self, width: float, height: float):
        """New surface size; applies from the next tick on."""
        self.initialize(width, height)
        if self.sim is not None:
            self.sim.width, self.sim.height = self.viewport

    # -------------------- State transitions --------------------

    def start(self) -> SimState:
        if self.viewport is None:
            raise NotInitializedError("initialize(width, height) must be called before start()")
        width, height = self.viewport

        player = Player(x=width / 2 - PLAYER_W / 2, y=height - START_OFFSET,
                        vx=0.0, vy=self.jump_strength, width=PLAYER_W, height=PLAYER_H)
        platforms = spawn_initial_platforms(player, width, height, self.rng)
        self.sim = SimState(width=width, height=height, player=player,
                            platforms=platforms, state=GameState.PLAYING)
        logger.info("game started (seed=%s, viewport=%dx%d)", self.seed, width, height)
        return self.sim

    def restart(self) -> SimState:
        """Throw the old game away entirely; never a resume."""
        return self.start()

    @property
    def state(self) -> GameState:
        return GameState.NOT_STARTED if self.sim is None else self.sim.state

    @property
    def running(self) -> bool:
        return self.state is GameState.PLAYING

    @property
    def score(self) -> int:
        return 0 if self.sim is None else self.sim.score

    # -------------------- Input --------------------

    def set_horizontal_velocity(self, vx: float):
        if not self.running:
            return
        self.sim.player.vx = max(-MAX_STEER, min(MAX_STEER, float(vx)))

    # -------------------- Frame --------------------

    def tick(self) -> TickResult:
        """
        One frame: physics (with scroll) -> bounces -> recycling -> game-over.
        Outside PLAYING this is a no-op that just reports the state.
        """
        if not self.running:
            return TickResult(self.state, self.score)

        sim = self.sim
        fell = step_player(sim, self.gravity)
        step_particles(sim.particles)

        hits = resolve_bounces(sim.player, sim.platforms, self.jump_strength)
        if hits:
            self._spawn_bounce_particles(sim.player)

        recycled = recycle_platforms(sim.platforms, sim.width, sim.height, self.rng)
        if len(sim.platforms) != PLATFORM_COUNT:
            raise InvariantError(f"expected {PLATFORM_COUNT} platforms, have {len(sim.platforms)}")

        sim.frame += 1
        if fell:
            sim.state = GameState.GAME_OVER
            logger.info("game over after %d frames, score=%dm", sim.frame, sim.score)

        return TickResult(sim.state, sim.score, bounced=bool(hits), recycled=recycled)

    def _spawn_bounce_particles(self, player: Player):
        cx = player.x + player.width / 2
        feet = player.y + player.height
        for _ in range(PARTICLES_PER_BOUNCE):
            angle = self._fx_rng.uniform(0.0, math.pi)   # fan out downward
            speed = self._fx_rng.uniform(0.5, 1.0) * PARTICLE_SPEED
            self.sim.particles.append(Particle(
                x=cx, y=feet,
                vx=math.cos(angle) * speed, vy=math.sin(angle) * speed,
                life=PARTICLE_LIFE
            ))

    # -------------------- Rendering view --------------------

    def snapshot(self) -> Snapshot:
        if self.sim is None:
            width, height = self.viewport or (0.0, 0.0)
            return Snapshot(width, height, pygame.Rect(0, 0, 0, 0), (), (), 0, GameState.NOT_STARTED)
        sim = self.sim
        particles: List[Tuple[float, float, int]] = [(p.x, p.y, p.life) for p in sim.particles]
        return Snapshot(
            width=sim.width,
            height=sim.height,
            player=sim.player.rect,
            platforms=tuple(p.rect for p in sim.platforms),
            particles=tuple(particles),
            score=sim.score,
            state=sim.state,
        )
