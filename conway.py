import numpy as np

import constants
from app import App, Graphics, SidePanel, TextItem
from grid import Grid, filled

NEIGHBOR_OFFSETS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
]


def count_live_neighbors(occupancy):
    """Return, for every cell, how many of its eight neighbours are alive.

    Cells outside the grid count as dead.
    """
    rows, columns = occupancy.shape
    padded = np.pad(occupancy.astype(np.int8), 1)
    counts = np.zeros((rows, columns), dtype=np.int8)
    for dx, dy in NEIGHBOR_OFFSETS:
        counts += padded[1 + dy:1 + dy + rows, 1 + dx:1 + dx + columns]
    return counts


def next_generation(occupancy):
    """Apply the B3/S23 rules to a boolean occupancy mask."""
    neighbors = count_live_neighbors(occupancy)
    survives = occupancy & ((neighbors == 2) | (neighbors == 3))
    born = ~occupancy & (neighbors == 3)
    return survives | born


class Conway(App):
    """Conway's game of life, writing each generation into a second grid and swapping."""
    frame_rate = constants.CONWAY_FRAME_RATE

    def __init__(self, rng=None, dimensions=constants.CONWAY_DIMENSIONS,
                 cells_offset=constants.CONWAY_OFFSET, live_cells=constants.CONWAY_SEED):
        super().__init__(rng)
        grid = Grid(*dimensions)
        for x, y in live_cells:
            grid.set_cell((x + cells_offset[0], y + cells_offset[1]), filled())
        self.tmp_grid = Grid(*dimensions)
        self.generation = 0
        self.graphics = Graphics(
            "Conway",
            grid,
            SidePanel([TextItem("Conway's game of life")]),
        )

    def run_frame(self):
        alive = next_generation(self.graphics.grid.occupancy())
        cell = filled()
        for (x, y), _ in self.tmp_grid:
            self.tmp_grid.set_cell((x, y), cell if alive[y, x] else None)
        self.graphics.grid, self.tmp_grid = self.tmp_grid, self.graphics.grid
        self.generation += 1
