"""
Core simulation tests: physics, scroll, recycling, bounces, state machine.

Usage (from repo root):
  python -m pytest src/tests
  python -m src.tests.test_simulation
"""

from __future__ import annotations
import random
import sys

import pytest

from src.jumper.config import (
    JUMP_STRENGTH, PLATFORM_COUNT, PLATFORM_W, RECYCLE_Y, MAX_STEER
)
from src.jumper.collision import resolve_bounces
from src.jumper.entities import GameState, Particle, Platform, Player, SimState
from src.jumper.errors import NotInitializedError, ViewportError
from src.jumper.platforms import recycle_platforms
from src.jumper.scroll import score_for, scroll_world
from src.jumper.simulation import Simulation

W, H = 400, 600


def make_sim(seed: int = 123) -> Simulation:
    sim = Simulation(seed=seed)
    sim.initialize(W, H)
    sim.start()
    return sim


def park_platforms(sim: Simulation, y: float = 0.0):
    """Move every platform out of the player's way, still on screen."""
    for p in sim.sim.platforms:
        p.x, p.y = 0.0, y


# ------------------------ Initialization ------------------------

def test_initial_layout():
    sim = make_sim()
    player = sim.sim.player
    plats = sim.sim.platforms

    assert sim.state is GameState.PLAYING
    assert len(plats) == PLATFORM_COUNT == 8
    assert (player.x, player.y) == (185.0, 450.0)
    assert player.vy == JUMP_STRENGTH and player.vx == 0.0
    assert (plats[0].x, plats[0].y) == (player.x - 20, player.y + 100)

    spacing = H / PLATFORM_COUNT
    for i, p in enumerate(plats[1:], start=1):
        assert p.y == pytest.approx(H - i * spacing)
        assert 0.0 <= p.x <= W - PLATFORM_W
    print("✓ Initial layout ok")


def test_zero_viewport_is_rejected():
    sim = Simulation(seed=1)
    with pytest.raises(ViewportError):
        sim.initialize(0, H)
    with pytest.raises(ValueError):
        sim.initialize(W, -5)
    assert sim.viewport is None
    with pytest.raises(NotInitializedError):
        sim.start()
    assert sim.state is GameState.NOT_STARTED
    print("✓ Viewport precondition ok")


def test_tick_before_start_is_noop():
    sim = Simulation(seed=1)
    sim.initialize(W, H)
    result = sim.tick()
    assert result.state is GameState.NOT_STARTED and result.score == 0
    assert not sim.running


# ------------------------ Physics / scroll ------------------------

def test_horizontal_wrap_left_and_right():
    sim = make_sim()
    park_platforms(sim)
    player = sim.sim.player

    player.x, player.vx = -(player.width + 1), 0.0
    sim.tick()
    assert player.x == W
    assert player.vx == 0.0

    player.x = W + 1
    sim.tick()
    assert player.x == -player.width
    assert player.vx == 0.0
    print("✓ Horizontal wrap ok")


def test_scroll_above_threshold():
    sim = make_sim()
    for i, p in enumerate(sim.sim.platforms):
        p.x, p.y = 10.0 * i, 50.0 * i      # all stay on screen after +200
    before = [(p.x, p.y) for p in sim.sim.platforms]

    player = sim.sim.player
    player.y, player.vy = 100.0, -0.4       # gravity cancels out this frame
    result = sim.tick()

    assert result.score == 20 and sim.score == 20
    assert player.y == H / 2
    for (x0, y0), p in zip(before, sim.sim.platforms):
        assert p.x == x0
        assert p.y == pytest.approx(y0 + 200.0)
    print("✓ Scroll ok")


def test_scroll_world_moves_particles_and_rounds_half_up():
    state = SimState(width=W, height=H, player=Player(x=0, y=0),
                     platforms=[Platform(0, 10)],
                     particles=[Particle(x=5, y=5, vx=0, vy=0, life=3)])
    assert scroll_world(state, 15.0) == 2
    assert state.platforms[0].y == 25.0
    assert state.particles[0].y == 20.0
    assert score_for(25.0) == 3
    assert score_for(4.9) == 0
    with pytest.raises(ValueError):
        scroll_world(state, -1.0)


def test_fall_ends_game_and_stops_ticking():
    sim = make_sim()
    player = sim.sim.player
    player.y, player.vy = 801.0, 0.0

    result = sim.tick()
    assert result.state is GameState.GAME_OVER
    assert not sim.running

    frozen = (player.x, player.y, sim.sim.frame, sim.score)
    again = sim.tick()
    assert again.state is GameState.GAME_OVER
    assert (player.x, player.y, sim.sim.frame, sim.score) == frozen
    print("✓ Game over ok")


# ------------------------ Collision ------------------------

def test_bounce_sets_jump_strength():
    sim = make_sim()
    park_platforms(sim)
    plat = sim.sim.platforms[3]
    plat.x, plat.y = 100.0, 500.0

    player = sim.sim.player
    player.x, player.y, player.vy = 100.0, 468.0, 5.0
    result = sim.tick()

    assert result.bounced
    assert player.vy == JUMP_STRENGTH
    assert len(sim.sim.particles) > 0
    print("✓ Bounce ok")


def test_no_bounce_while_rising():
    player = Player(x=0, y=0, vy=-3.0)
    plat = Platform(0, 25)
    assert resolve_bounces(player, [plat]) == []
    assert player.vy == -3.0


def test_swept_window_catches_fast_fall():
    # feet 25 px past a 12 px platform: only the velocity-sized window catches it
    player = Player(x=0, y=0, vy=30.0)
    plat = Platform(0, player.height - 25)
    assert resolve_bounces(player, [plat]) == [0]
    assert player.vy == JUMP_STRENGTH

    slow = Player(x=0, y=0, vy=5.0)
    assert resolve_bounces(slow, [Platform(0, slow.height - 25)]) == []


def test_simultaneous_contacts_all_reported():
    player = Player(x=0, y=0, vy=6.0)
    plats = [Platform(0, 28), Platform(10, 26), Platform(200, 28)]
    assert resolve_bounces(player, plats) == [0, 1]
    assert player.vy == JUMP_STRENGTH


# ------------------------ Recycling ------------------------

def test_recycle_in_place():
    rng = random.Random(3)
    plats = [Platform(10, 601), Platform(20, 600), Platform(30, 100)]
    ids = [id(p) for p in plats]

    assert recycle_platforms(plats, W, H, rng) == 1
    assert [id(p) for p in plats] == ids
    assert plats[0].y == RECYCLE_Y and 0.0 <= plats[0].x <= W - PLATFORM_W
    assert (plats[1].x, plats[1].y) == (20, 600)
    assert (plats[2].x, plats[2].y) == (30, 100)


# ------------------------ Long runs ------------------------

def test_invariants_over_long_run():
    sim = make_sim(seed=99)
    rng = random.Random(0)
    last_score = 0
    for _ in range(3000):
        sim.set_horizontal_velocity(rng.uniform(-MAX_STEER, MAX_STEER))
        result = sim.tick()
        assert len(sim.sim.platforms) == PLATFORM_COUNT
        assert result.score >= last_score
        last_score = result.score
        if not sim.running:
            break
        assert sim.sim.player.y >= H / 2
    print("✓ Long-run invariants ok")


def test_determinism():
    def rollout(seed: int):
        sim = make_sim(seed)
        steer = random.Random(42)
        for _ in range(500):
            sim.set_horizontal_velocity(steer.uniform(-8, 8))
            sim.tick()
        return sim.score, [(p.x, p.y) for p in sim.sim.platforms], sim.state

    assert rollout(5) == rollout(5)
    print("✓ Determinism ok")


def test_restart_reproduces_initial_state():
    sim = make_sim()
    sim.sim.player.y = 900.0
    sim.tick()
    assert sim.state is GameState.GAME_OVER

    sim.restart()
    fresh = sim.sim
    assert fresh.state is GameState.PLAYING and sim.running
    assert fresh.score == 0 and fresh.frame == 0
    assert len(fresh.platforms) == PLATFORM_COUNT
    assert fresh.particles == []
    assert (fresh.player.x, fresh.player.y) == (185.0, 450.0)
    assert fresh.player.vy == JUMP_STRENGTH and fresh.player.vx == 0.0
    print("✓ Restart ok")


def test_steering_is_clamped_and_ignored_when_not_playing():
    sim = make_sim()
    sim.set_horizontal_velocity(50.0)
    assert sim.sim.player.vx == MAX_STEER
    sim.set_horizontal_velocity(-50.0)
    assert sim.sim.player.vx == -MAX_STEER

    sim.sim.player.y = 900.0
    sim.tick()
    vx = sim.sim.player.vx
    sim.set_horizontal_velocity(1.0)
    assert sim.sim.player.vx == vx


def test_resize_applies_to_running_game():
    sim = make_sim()
    sim.resize(800, 1000)
    assert (sim.sim.width, sim.sim.height) == (800.0, 1000.0)
    with pytest.raises(ViewportError):
        sim.resize(0, 0)
    assert (sim.sim.width, sim.sim.height) == (800.0, 1000.0)


def test_snapshot_is_detached():
    sim = make_sim()
    snap = sim.snapshot()
    assert len(snap.platforms) == PLATFORM_COUNT
    assert snap.state is GameState.PLAYING
    snap.platforms[0].y += 1000
    assert sim.sim.platforms[0].y < 1000


def main():
    tests = [v for k, v in sorted(globals().items()) if k.startswith("test_") and callable(v)]
    try:
        for t in tests:
            t()
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    print("🎉 All simulation tests passed")


if __name__ == "__main__":
    main()
