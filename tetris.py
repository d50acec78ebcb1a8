import logging

import constants
from app import App, Graphics, GraphicsItem, SidePanel, TextItem
from grid import Cell, Grid
from tetromino import generate_next

logger = logging.getLogger(f"{constants.LOGGER_NAME}.tetris")

HELP_TEXT = """\
Controls:
--------
A: move left
D: move right
W: rotate
S: fall faster
"""

SCORE_ITEM = 0
PREVIEW_ITEM = 2


class Tetris(App):
    """Tetris on a 10x20 board; the falling piece is painted into the grid."""
    frame_rate = constants.TETRIS_FRAME_RATE

    def __init__(self, rng=None):
        super().__init__(rng)
        self.grid = Grid(*constants.TETRIS_DIMENSIONS)
        self.preview = Grid(*constants.TETRIS_PREVIEW_DIMENSIONS)
        self.score = 0
        self.frame = 0
        self.fall_delay = constants.TETRIS_FALL_DELAY
        self.holding_down = False
        self.graphics = Graphics(
            "Tetris",
            self.grid,
            SidePanel([
                TextItem(self.score_text()),
                TextItem("Next:"),
                GraphicsItem(self.preview),
                TextItem(HELP_TEXT),
            ]),
        )
        self.falling = generate_next(self.rng)
        self.upcoming = generate_next(self.rng)
        self.paint(self.falling)
        self.draw_preview()

    @property
    def game_over(self):
        return self.falling is None

    def score_text(self):
        return f"Score: {self.score}"

    def cell_for(self, tetromino):
        return Cell(tetromino.color(), constants.TETRIS_SYMBOL)

    def paint(self, tetromino):
        cell = self.cell_for(tetromino)
        for block in tetromino.blocks():
            if self.grid.is_position_valid(block):
                self.grid.set_cell(block, cell)

    def erase(self, tetromino):
        for block in tetromino.blocks():
            if self.grid.is_position_valid(block):
                self.grid.remove_cell(block)

    def draw_preview(self):
        """Show the upcoming piece in the side panel grid."""
        self.preview.clear()
        cell = self.cell_for(self.upcoming)
        for block in self.upcoming.local_blocks():
            self.preview.set_cell(block, cell)

    def run_frame(self):
        """Let the falling piece drop; land it, clear rows and spawn the next one."""
        if self.game_over:
            return

        self.frame += 1

        if not self.holding_down and self.frame % self.fall_delay != 0:
            # Simulate slower fall speed by ignoring some frames
            return

        if not self.try_move('down'):
            self.remove_any_complete_rows()
            self.spawn_next()

    def spawn_next(self):
        """Promote the previewed piece; the game ends if it has no room."""
        self.falling = None
        next_piece = self.upcoming
        self.upcoming = generate_next(self.rng)
        self.draw_preview()

        game_over = self.would_collide(next_piece)
        self.paint(next_piece)

        if game_over:
            self.graphics.side_panel.set_text(SCORE_ITEM, f"Game over.\nScore: {self.score}")
            logger.info(f"Game over with score {self.score}")
            return

        self.falling = next_piece

    def handle_pressed_key(self, key):
        if self.game_over:
            return
        if key == 'a':
            self.try_move('left')
        elif key == 'd':
            self.try_move('right')
        elif key == 'w':
            self.rotate_if_possible()
        elif key == 's':
            was_already = self.holding_down
            self.holding_down = True
            if not was_already:
                self.run_frame()

    def handle_released_key(self, key):
        if key == 's':
            self.holding_down = False

    def replace_falling(self, moved):
        self.erase(self.falling)
        self.paint(moved)
        self.falling = moved

    def try_move(self, direction):
        """Move the falling piece one cell if nothing is in the way."""
        moved = self.falling.translated(direction)
        if self.would_collide(moved):
            return False
        self.replace_falling(moved)
        return True

    def rotate_if_possible(self):
        """Rotate clockwise, trying each wall kick offset until one fits."""
        rotated = self.falling.rotated()
        for dx, dy in self.falling.kicks():
            candidate = rotated.shifted(dx, dy)
            if not self.would_collide(candidate):
                self.replace_falling(candidate)
                return True
        return False

    def would_collide(self, hypothetical):
        """Check the piece against walls, floor and settled blocks, ignoring itself."""
        own_blocks = set(self.falling.blocks()) if self.falling is not None else set()
        return any(
            not self.grid.is_cell_empty(block) and block not in own_blocks
            for block in hypothetical.blocks()
        )

    def remove_any_complete_rows(self):
        """Clear full rows from the bottom up, shifting everything above down."""
        width, height = self.grid.dimensions()
        cleared = 0
        y = height - 1
        while y >= 0:
            if not self.grid.occupancy()[y].all():
                y -= 1
                continue
            cleared += 1
            self.score += 1
            if self.score % 2 == 0:
                self.fall_delay = max(1, self.fall_delay - 1)
            for shift_y in range(y, -1, -1):
                for x in range(width):
                    self.grid.set_cell((x, shift_y), self.grid.get_cell((x, shift_y - 1)))
        if cleared:
            self.graphics.side_panel.set_text(SCORE_ITEM, self.score_text())
            logger.info(f"Cleared {cleared} row(s), score {self.score}, fall delay {self.fall_delay}")
        return cleared
