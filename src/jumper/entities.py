# src/jumper/entities.py
from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import List
import pygame
from .config import PLAYER_W, PLAYER_H, PLATFORM_W, PLATFORM_H


class GameState(enum.Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Player:
    """
    The bouncing character. Coordinates are TOP-left based, y grows downward:
    - vy < 0 means moving up
    - vx is written by the input layer between frames
    """
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    width: int = PLAYER_W
    height: int = PLAYER_H

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)


@dataclass
class Platform:
    x: float
    y: float
    width: int = PLATFORM_W
    height: int = PLATFORM_H

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)


@dataclass
class Particle:
    """Bounce spark. Purely visual: scrolled with the world, never collides."""
    x: float
    y: float
    vx: float
    vy: float
    life: int

    @property
    def alive(self) -> bool:
        return self.life > 0


@dataclass
class SimState:
    """Everything one game owns. Passed explicitly to the step functions."""
    width: float
    height: float
    player: Player
    platforms: List[Platform] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    score: int = 0
    state: GameState = GameState.NOT_STARTED
    frame: int = 0

    @property
    def scroll_threshold(self) -> float:
        return self.height / 2
