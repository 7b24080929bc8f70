# src/jumper/game.py
# command is python -m src.jumper.game
import sys, argparse, logging
import pygame
from pygame import K_SPACE, K_ESCAPE, K_LEFT, K_RIGHT, K_a, K_d
from .config import WIDTH, HEIGHT, FPS, SEED_DEFAULT
from .controls import steer_from_keys, steer_from_pointer
from .render import draw_frame
from .simulation import Simulation

logger = logging.getLogger(__name__)


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Platform seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--width", type=int, default=WIDTH)
    p.add_argument("--height", type=int, default=HEIGHT)
    p.add_argument("--fps", type=int, default=FPS)
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def run():
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Resolve seed: None -> use SEED_DEFAULT; -1 -> random
    if args.seed is None:
        launch_seed = SEED_DEFAULT
    elif args.seed == -1:
        launch_seed = None
    else:
        launch_seed = args.seed

    pygame.init()
    pygame.display.set_caption("Neon Jump")
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)

    sim = Simulation(seed=launch_seed)
    sim.initialize(*screen.get_size())
    keyboard_steer = False   # last input wins: keys or pointer

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                try:
                    sim.resize(*event.size)
                except ValueError:
                    logger.warning("ignoring degenerate resize to %s", event.size)
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == K_SPACE and not sim.running:
                    sim.restart()
                if event.key in (K_LEFT, K_RIGHT, K_a, K_d):
                    keyboard_steer = True
            if event.type == pygame.MOUSEMOTION:
                keyboard_steer = False
                sim.set_horizontal_velocity(
                    steer_from_pointer(event.pos[0], 0, screen.get_width()))
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not sim.running:
                sim.restart()

        if keyboard_steer:
            keys = pygame.key.get_pressed()
            sim.set_horizontal_velocity(steer_from_keys(
                keys[K_LEFT] or keys[K_a], keys[K_RIGHT] or keys[K_d]))

        # Simulation only advances while playing; the overlay stays up otherwise
        if sim.running:
            sim.tick()

        draw_frame(screen, sim.snapshot(), font)
        pygame.display.flip()
        clock.tick(args.fps)


if __name__ == "__main__":
    run()
