# constants.py

"""
Application constants.

Static values shared by the games and the front ends. Runtime choices
(which game, which front end, the seed) come from the command line.
"""

# Logging
LOGGER_NAME = "gridarcade"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Colors (RGB)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

# Particles
PARTICLES_DIMENSIONS = (30, 30)
PARTICLES_FRAME_RATE = 5
SOLID_COLOR = (120, 70, 70)
PARTICLE_COLORS = [(100, 160, 220), (120, 120, 250), (150, 150, 250)]
SPAWN_POSITIONS = [(0, 1), (0, 0), (0, 2)]
INITIAL_SPAWN_RATE = 0.1
INITIAL_SPAWN_VELOCITY = (1, 0)
SPAWN_RATE_STEP = 0.05
MIN_SPAWN_SPEED = 1
MAX_SPAWN_SPEED = 10

# Feel parameters of the sand physics, kept at their tuned values
BOUNCE_DAMPING = 0.6
GRAVITY_BONUS_CHANCE = 0.1
FRICTION_CHANCE = 0.5
LIQUID_DRIFT_CHANCE = 0.2

SOLID_CELLS = [
    (0, 3), (1, 3), (2, 3), (3, 3), (4, 3), (5, 3), (6, 3), (7, 3), (8, 3), (9, 3), (10, 3),
    (12, 13), (13, 13), (14, 13), (15, 13), (16, 13), (17, 13), (18, 13), (18, 12), (18, 11),
    (6, 29), (6, 28), (6, 27), (6, 26), (5, 26), (5, 25),
    (7, 29), (7, 28), (7, 27), (7, 26), (8, 26), (8, 25),
]

# Tetris
TETRIS_DIMENSIONS = (10, 20)
TETRIS_FRAME_RATE = 30
TETRIS_FALL_DELAY = 15
TETRIS_SYMBOL = "#"
TETRIS_PREVIEW_DIMENSIONS = (4, 4)

# Snake
SNAKE_DIMENSIONS = (30, 20)
SNAKE_FRAME_RATE = 10
SNAKE_START = (1, 5)
SNAKE_COLOR = (255, 255, 100)
FOOD_COLOR = (255, 100, 100)
FOOD_SYMBOL = "O"
SNAKE_BODY_SYMBOL = "O"

# Conway
CONWAY_DIMENSIONS = (20, 20)
CONWAY_FRAME_RATE = 10
CONWAY_OFFSET = (10, 0)
CONWAY_SEED = [
    (2, 3), (3, 3), (4, 3), (5, 3),
    (3, 4), (4, 4), (5, 4), (6, 4),
    (8, 1), (9, 1), (8, 2), (9, 2),
]

# Noise
NOISE_DIMENSIONS = (10, 5)
NOISE_FRAME_RATE = 15

# Race
RACE_DIMENSIONS = (30, 30)
RACE_FRAME_RATE = 30
RACE_POS_ON_SCREEN = (14, 14)
RACE_MINIMAP_SIZE = 8
RACE_MOVE_INTERVAL = 8
RACE_CURSOR_PERIOD = 10
RACE_CURSOR_VISIBLE = 6
CAR_COLOR = (250, 250, 250)
CRASH_COLOR = (250, 50, 50)
GRASS_COLOR = (100, 150, 100)
OBSTACLE_COLOR = (100, 100, 150)
CURSOR_COLOR = (200, 250, 200)
MINIMAP_COLOR = (150, 150, 150)

# Terminal front end
TERMINAL_CELL_WIDTH = 3

# Window front end
WINDOW_CELL_SIZE = 30
WINDOW_MARGIN = 10
WINDOW_TEXT_AREA_WIDTH = 300
WINDOW_FPS = 60
WINDOW_BG_COLOR = (0, 0, 0)
WINDOW_GRID_BG_COLOR = (50, 50, 50)
WINDOW_TEXT_COLOR = (255, 255, 255)
WINDOW_FONT_SIZE = 30
