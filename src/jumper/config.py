# --- Display ---
WIDTH = 400
HEIGHT = 600
FPS = 60

# --- World / Physics (per frame, not per second) ---
GRAVITY = 0.4               # px/frame^2, positive = down
JUMP_STRENGTH = -12.0       # vy applied on every bounce
FALL_MARGIN = 200           # game over once y > HEIGHT + FALL_MARGIN
SCORE_DIVISOR = 10          # 10 px of scroll = 1 m of score

# --- Player ---
PLAYER_W = 30
PLAYER_H = 30
START_OFFSET = 150          # spawn y = HEIGHT - START_OFFSET
MAX_STEER = 8.0             # |vx| cap coming from input

# --- Platforms ---
PLATFORM_COUNT = 8
PLATFORM_W = 70
PLATFORM_H = 12
RECYCLE_Y = -20             # recycled platforms re-enter just above the top
FIRST_PLATFORM_DX = -20     # guaranteed first platform, relative to spawn
FIRST_PLATFORM_DY = 100
SEED_DEFAULT = 12345

# --- Bounce particles ---
PARTICLES_PER_BOUNCE = 8
PARTICLE_LIFE = 24          # frames
PARTICLE_SPEED = 2.5
PARTICLE_GRAVITY = 0.15

# --- Colors (RGB) ---
COLOR_BG = (10, 8, 24)
COLOR_GRID = (18, 30, 44)
COLOR_FG = (220, 232, 255)
COLOR_PLAYER = (255, 0, 255)
COLOR_HIGHLIGHT = (255, 255, 255)
COLOR_PLAT = (0, 242, 255)
COLOR_PLAT_EDGE = (0, 153, 255)
COLOR_DANGER = (255, 86, 110)
GRID_SIZE = 40
