import logging

import constants
from app import App, Graphics, SidePanel, TextItem, translated
from grid import Cell, Grid

logger = logging.getLogger(f"{constants.LOGGER_NAME}.snake")

HELP_TEXT = "Use WASD keys to control the snake!"

DIRECTION_KEYS = {
    'w': 'up',
    'a': 'left',
    's': 'down',
    'd': 'right',
}

DIRECTION_SYMBOLS = {
    'up': '^',
    'left': '<',
    'down': 'V',
    'right': '>',
}


class Snake(App):
    frame_rate = constants.SNAKE_FRAME_RATE

    def __init__(self, rng=None):
        """Place a one-cell snake heading right and the first piece of food."""
        super().__init__(rng)
        self.grid = Grid(*constants.SNAKE_DIMENSIONS)
        self.alive = True
        self.score = 0
        self.direction = 'right'
        self.snake = [constants.SNAKE_START]
        self.grid.set_cell(constants.SNAKE_START, self.head_cell())
        self.graphics = Graphics(
            "Snake",
            self.grid,
            SidePanel([TextItem(self.score_text()), TextItem(HELP_TEXT)]),
        )
        self.food = self.pick_new_food_location()
        self.grid.set_cell(self.food, Cell(constants.FOOD_COLOR, constants.FOOD_SYMBOL))

    def score_text(self):
        return f"Score: {self.score}"

    def head_cell(self):
        return Cell(constants.SNAKE_COLOR, DIRECTION_SYMBOLS[self.direction])

    def set_direction(self, direction):
        """Change heading unless it would turn the head straight back into the neck."""
        if len(self.snake) >= 2:
            neck = self.snake[-2]
            if translated(self.snake[-1], direction) == neck:
                return
        self.direction = direction

    def pick_new_food_location(self):
        """Pick a random cell that the snake does not cover."""
        occupied = set(self.snake)
        width, height = self.grid.dimensions()
        candidates = [
            (x, y) for x in range(width) for y in range(height) if (x, y) not in occupied
        ]
        if not candidates:
            raise RuntimeError("No vacant food location")
        return self.rng.choice(candidates)

    def run_frame(self):
        if not self.alive:
            return

        head = self.snake[-1]
        self.grid.set_cell(head, Cell(constants.SNAKE_COLOR, constants.SNAKE_BODY_SYMBOL))
        new_head = translated(head, self.direction)

        if self.grid.is_position_valid(new_head):
            if new_head == self.food:
                self.score += 1
                self.graphics.side_panel.set_text(0, self.score_text())
                # the new head is not in the snake yet, so keep it out of the candidates
                self.snake.append(new_head)
                self.food = self.pick_new_food_location()
                self.snake.pop()
                self.grid.set_cell(self.food, Cell(constants.FOOD_COLOR, constants.FOOD_SYMBOL))
            else:
                self.grid.remove_cell(self.snake.pop(0))

            if new_head in self.snake:
                self.alive = False
            else:
                self.snake.append(new_head)
                self.grid.set_cell(new_head, self.head_cell())
        else:
            self.alive = False

        if not self.alive:
            self.graphics.side_panel.set_text(0, f"Game over.\nScore: {self.score}")
            logger.info(f"Snake died with length {len(self.snake)} and score {self.score}")

    def handle_pressed_key(self, key):
        direction = DIRECTION_KEYS.get(key)
        if direction is not None:
            self.set_direction(direction)
