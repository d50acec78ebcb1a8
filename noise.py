import logging

import constants
from app import App, Graphics
from grid import Grid, filled

logger = logging.getLogger(f"{constants.LOGGER_NAME}.noise")


class Noise(App):
    """Fills one random empty cell per tick until the grid is full."""
    frame_rate = constants.NOISE_FRAME_RATE

    def __init__(self, rng=None, dimensions=constants.NOISE_DIMENSIONS):
        super().__init__(rng)
        grid = Grid(*dimensions)
        self.empty_indices = list(range(grid.columns * grid.rows))
        self.graphics = Graphics("Noise", grid)

    def run_frame(self):
        if not self.empty_indices:
            return
        i = self.rng.randrange(len(self.empty_indices))
        self.graphics.grid.set_by_index(self.empty_indices[i], filled())
        # swap-remove
        self.empty_indices[i] = self.empty_indices[-1]
        self.empty_indices.pop()

        if not self.empty_indices:
            self.graphics.title = "The end."
            logger.info("Noise grid is full")
