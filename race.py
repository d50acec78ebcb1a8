import logging
import os

import constants
from app import App, Graphics, GraphicsItem, SidePanel, TextItem
from grid import Cell, Grid

logger = logging.getLogger(f"{constants.LOGGER_NAME}.race")

DEFAULT_MAP_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'maps', 'race_map.txt')

HELP_TEXT = "Use WASD to control the car.\nThe blinking dot indicates where you are heading."

CAR = Cell(constants.CAR_COLOR)
CRASH = Cell(constants.CRASH_COLOR)
GRASS = Cell(constants.GRASS_COLOR)
OBSTACLE = Cell(constants.OBSTACLE_COLOR)
CURSOR = Cell(constants.CURSOR_COLOR)
MINIMAP_CAR = Cell(constants.WHITE)
MINIMAP_GROUND = Cell(constants.MINIMAP_COLOR)

TIME_ITEM = 0
MINIMAP_ITEM = 2
HELP_ITEM = 3


class MapError(ValueError):
    """Raised when a race map is malformed."""


def sign(value):
    return (value > 0) - (value < 0)


class World:
    """The whole race track in world coordinates."""
    def __init__(self, dimensions, car, obstacles, grass):
        self.dimensions = dimensions
        self.car = car
        self.obstacles = set(obstacles)
        self.grass = set(grass)


def parse_map(lines):
    """Build a World from map lines: 'x' obstacle, '.' grass, 'o' the car."""
    car = None
    obstacles = []
    grass = []
    max_x = 0
    line_count = 0
    for y, line in enumerate(lines):
        line_count += 1
        for x, ch in enumerate(line.rstrip('\r\n')):
            if ch == 'x':
                obstacles.append((x, y))
            elif ch == 'o':
                if car is not None:
                    raise MapError(f"Second car position at {(x, y)}, first at {car}")
                car = (x, y)
            elif ch == '.':
                grass.append((x, y))
            max_x = max(max_x, x)
    if car is None:
        raise MapError("Must specify car position")
    dimensions = (max_x, line_count - 1)
    if dimensions[0] < 1 or dimensions[1] < 1:
        raise MapError(f"Map too small: {dimensions}")
    return World(dimensions, car, obstacles, grass)


def load_map(path=DEFAULT_MAP_PATH):
    with open(path, 'r') as f:
        world = parse_map(f)
    logger.debug(f"Loaded map {path}: size {world.dimensions}, car at {world.car}")
    return world


def minimap_size(world_dimensions, max_size=constants.RACE_MINIMAP_SIZE):
    """Scale the world down so its longest side spans max_size cells."""
    width, height = world_dimensions
    if width > height:
        return max_size, max(1, max_size * height // width)
    return max(1, max_size * width // height), max_size


class Cursor:
    """Blinking marker showing where the car will head on its next move."""
    def __init__(self, pos_on_screen):
        self.pos_on_screen = pos_on_screen
        self.timer = 0
        self.direction = [0, 0]

    def update(self):
        self.timer = (self.timer + 1) % constants.RACE_CURSOR_PERIOD

    def handle_pressed_key(self, key):
        if key == 'w':
            self.direction[1] = max(-1, self.direction[1] - 1)
        elif key == 'a':
            self.direction[0] = max(-1, self.direction[0] - 1)
        elif key == 's':
            self.direction[1] = min(self.direction[1] + 1, 1)
        elif key == 'd':
            self.direction[0] = min(self.direction[0] + 1, 1)

    def draw(self, grid):
        if self.timer >= constants.RACE_CURSOR_VISIBLE:
            return
        point = (
            self.pos_on_screen[0] + self.direction[0],
            self.pos_on_screen[1] + self.direction[1],
        )
        # at high speed the projected position can leave the viewport
        if grid.is_position_valid(point):
            grid.set_cell(point, CURSOR)


class Race(App):
    """Top-down racer: steer with momentum and avoid the obstacles."""
    frame_rate = constants.RACE_FRAME_RATE

    def __init__(self, rng=None, world=None):
        super().__init__(rng)
        self.world = world if world is not None else load_map()
        self.grid = Grid(*constants.RACE_DIMENSIONS)
        self.pos_on_screen = constants.RACE_POS_ON_SCREEN
        self.minimap = Grid(*minimap_size(self.world.dimensions))
        self.crashed = False
        self.velocity = [0, 0]
        self.cursor = Cursor(self.pos_on_screen)
        self.timer = 0
        self.elapsed_time = 0
        self.graphics = Graphics(
            "Race",
            self.grid,
            SidePanel([
                TextItem(self.time_text()),
                TextItem("Minimap:"),
                GraphicsItem(self.minimap),
                TextItem(HELP_TEXT),
            ]),
        )
        self.update_graphics()

    def time_text(self):
        return f"Time: {self.elapsed_time}"

    def to_screen(self, world_pos):
        return (
            world_pos[0] - self.world.car[0] + self.pos_on_screen[0],
            world_pos[1] - self.world.car[1] + self.pos_on_screen[1],
        )

    def update_graphics(self):
        """Redraw the viewport around the car, the minimap and the cursor."""
        self.grid.clear()
        for world_points, cell in ((self.world.obstacles, OBSTACLE), (self.world.grass, GRASS)):
            for world_pos in world_points:
                on_screen = self.to_screen(world_pos)
                if self.grid.is_position_valid(on_screen):
                    self.grid.set_cell(on_screen, cell)

        self.grid.set_cell(self.pos_on_screen, CRASH if self.crashed else CAR)

        self.draw_minimap()

        if not self.crashed:
            self.cursor.draw(self.grid)

    def draw_minimap(self):
        buf_w, buf_h = self.minimap.dimensions()
        world_w, world_h = self.world.dimensions
        x_car, y_car = self.world.car
        for y in range(buf_h):
            for x in range(buf_w):
                in_cell = (
                    world_w * x // buf_w <= x_car <= world_w * (x + 1) // buf_w
                    and world_h * y // buf_h <= y_car <= world_h * (y + 1) // buf_h
                )
                self.minimap.set_cell((x, y), MINIMAP_CAR if in_cell else MINIMAP_GROUND)

    def run_frame(self):
        self.timer = (self.timer + 1) % constants.RACE_MOVE_INTERVAL

        if self.timer == 0 and not self.crashed:
            self.elapsed_time += 1
            self.graphics.side_panel.set_text(TIME_ITEM, self.time_text())
            self.velocity[0] += self.cursor.direction[0]
            self.velocity[1] += self.cursor.direction[1]

            self.cursor.pos_on_screen = (
                self.pos_on_screen[0] + self.velocity[0],
                self.pos_on_screen[1] + self.velocity[1],
            )
            self.cursor.direction = [0, 0]
            self.move_car()

        self.cursor.update()
        self.update_graphics()

    def move_car(self):
        """Step the car towards car + velocity; an obstacle on the way crashes it."""
        x0, y0 = self.world.car
        x_dst = x0 + self.velocity[0]
        y_dst = y0 + self.velocity[1]
        while (x0, y0) != (x_dst, y_dst):
            if abs(x_dst - x0) > abs(y_dst - y0):
                x0 += sign(x_dst - x0)
            else:
                y0 += sign(y_dst - y0)
            if (x0, y0) in self.world.obstacles:
                self.crashed = True
                self.graphics.side_panel.set_text(HELP_ITEM, "Game Over:\nYou crashed!")
                logger.info(f"Crashed at {(x0, y0)} after {self.elapsed_time}s")
                break
        self.world.car = (x0, y0)

    def handle_pressed_key(self, key):
        self.cursor.handle_pressed_key(key)
