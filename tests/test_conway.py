import numpy as np

import constants
from conway import Conway, count_live_neighbors, next_generation


def live(game):
    return {point for point, cell in game.graphics.grid if cell is not None}


def test_seed_pattern_is_offset():
    game = Conway()
    expected = {(x + constants.CONWAY_OFFSET[0], y + constants.CONWAY_OFFSET[1])
                for x, y in constants.CONWAY_SEED}
    assert live(game) == expected


def test_blinker_oscillates():
    game = Conway(dimensions=(5, 5), cells_offset=(0, 0), live_cells=[(1, 2), (2, 2), (3, 2)])
    game.run_frame()
    assert live(game) == {(2, 1), (2, 2), (2, 3)}
    game.run_frame()
    assert live(game) == {(1, 2), (2, 2), (3, 2)}
    assert game.generation == 2


def test_block_is_still():
    block = [(0, 0), (1, 0), (0, 1), (1, 1)]
    game = Conway(dimensions=(4, 4), cells_offset=(0, 0), live_cells=block)
    game.run_frame()
    assert live(game) == set(block)


def test_generations_swap_buffers():
    game = Conway()
    first, second = game.graphics.grid, game.tmp_grid
    game.run_frame()
    assert game.graphics.grid is second
    assert game.tmp_grid is first


def test_outside_counts_as_dead():
    mask = np.zeros((3, 3), dtype=bool)
    mask[0, 0] = True
    counts = count_live_neighbors(mask)
    assert counts[0, 0] == 0
    assert counts[1, 1] == 1
    assert counts[0, 1] == 1
    assert counts[2, 2] == 0


def test_lonely_cell_dies():
    mask = np.zeros((3, 3), dtype=bool)
    mask[1, 1] = True
    assert not next_generation(mask).any()
