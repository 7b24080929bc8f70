# src/jumper/render.py
from __future__ import annotations
from typing import Optional
import pygame
from .config import (
    COLOR_BG, COLOR_GRID, COLOR_FG, COLOR_PLAYER, COLOR_HIGHLIGHT,
    COLOR_PLAT, COLOR_PLAT_EDGE, COLOR_DANGER, GRID_SIZE, PARTICLE_LIFE
)
from .entities import GameState
from .simulation import Snapshot


def draw_grid(surf: pygame.Surface):
    w, h = surf.get_size()
    for x in range(0, w + 1, GRID_SIZE):
        pygame.draw.line(surf, COLOR_GRID, (x, 0), (x, h), 1)
    for y in range(0, h + 1, GRID_SIZE):
        pygame.draw.line(surf, COLOR_GRID, (0, y), (w, y), 1)


def draw_platform(surf: pygame.Surface, rect: pygame.Rect):
    pygame.draw.rect(surf, COLOR_PLAT, rect)
    # right half a shade darker, cheap stand-in for a gradient
    right = rect.copy()
    right.width //= 2
    right.x += rect.width - right.width
    pygame.draw.rect(surf, COLOR_PLAT_EDGE, right)


def draw_player(surf: pygame.Surface, rect: pygame.Rect, color=COLOR_PLAYER):
    pygame.draw.rect(surf, color, rect)
    pygame.draw.rect(surf, COLOR_HIGHLIGHT, pygame.Rect(rect.x + 5, rect.y + 5, 10, 5))


def draw_particles(surf: pygame.Surface, snap: Snapshot):
    for x, y, life in snap.particles:
        radius = max(1, int(3 * life / PARTICLE_LIFE))
        pygame.draw.circle(surf, COLOR_PLAT, (int(x), int(y)), radius)


def _center_text(surf: pygame.Surface, font: pygame.font.Font, msg: str, y: int, color=COLOR_FG):
    img = font.render(msg, True, color)
    surf.blit(img, (surf.get_width() // 2 - img.get_width() // 2, y))


def draw_frame(surf: pygame.Surface, snap: Snapshot, font: Optional[pygame.font.Font] = None):
    """Full frame from a snapshot. Never touches simulation state."""
    surf.fill(COLOR_BG)
    draw_grid(surf)

    if snap.state is not GameState.NOT_STARTED:
        for rect in snap.platforms:
            draw_platform(surf, rect)
        draw_particles(surf, snap)
        color = COLOR_PLAYER if snap.state is GameState.PLAYING else COLOR_DANGER
        draw_player(surf, snap.player, color)

    if font is None:
        return

    h = surf.get_height()
    if snap.state is GameState.PLAYING:
        surf.blit(font.render(f"{snap.score}m", True, COLOR_FG), (12, 10))
    elif snap.state is GameState.NOT_STARTED:
        _center_text(surf, font, "NEON JUMP", h // 2 - 30)
        _center_text(surf, font, "SPACE / click to start", h // 2)
    else:
        _center_text(surf, font, "GAME OVER", h // 2 - 30, COLOR_DANGER)
        _center_text(surf, font, f"Score: {snap.score}m", h // 2)
        _center_text(surf, font, "SPACE / click to restart", h // 2 + 30)
