import random

import constants
from grid import Cell
from tetris import Tetris
from tetromino import SHAPES, TETROMINO_COLORS, Tetromino, generate_next

BLOCK = Cell((1, 2, 3), '#')


def soft_drop(game, times=1):
    for _ in range(times):
        game.handle_pressed_key('s')
        game.handle_released_key('s')


def test_tetromino_spawn_blocks():
    assert Tetromino('I').blocks() == [(3, 0), (4, 0), (5, 0), (6, 0)]
    assert Tetromino('O').blocks() == [(4, 0), (5, 0), (4, 1), (5, 1)]
    assert Tetromino('T').blocks() == [(4, 0), (5, 0), (6, 0), (5, 1)]


def test_tetromino_rotation_cycles():
    piece = Tetromino('L', origin=(2, 2))
    turned = piece.rotated().rotated().rotated().rotated()
    assert turned == piece
    assert piece.rotated().blocks() == [(2, 2), (3, 2), (3, 3), (3, 4)]


def test_o_piece_does_not_kick():
    assert Tetromino('O').kicks() == [(0, 0)]
    assert Tetromino('T').kicks()[0] == (0, 0)
    # SRS (x, y-up) offsets are flipped onto the board
    assert Tetromino('T').kicks()[2] == (-1, -1)


def test_generate_next_uses_rng():
    shapes = {generate_next(random.Random(seed)).shape for seed in range(200)}
    assert shapes == set(SHAPES)


def test_initial_piece_is_painted(scripted):
    game = Tetris(rng=scripted())
    for block in game.falling.blocks():
        assert game.grid.get_cell(block) == Cell(TETROMINO_COLORS['I'], constants.TETRIS_SYMBOL)
    assert game.graphics.side_panel.text_item(0).text == "Score: 0"


def test_preview_shows_upcoming_piece(scripted):
    game = Tetris(rng=scripted(choices=[0, 2]))
    assert game.upcoming.shape == 'T'
    painted = {point for point, cell in game.preview if cell is not None}
    assert painted == {(0, 1), (1, 1), (2, 1), (1, 2)}


def test_piece_falls_every_fall_delay_frames(scripted):
    game = Tetris(rng=scripted())
    start = game.falling.origin
    for _ in range(constants.TETRIS_FALL_DELAY - 1):
        game.run_frame()
    assert game.falling.origin == start
    game.run_frame()
    assert game.falling.origin == (start[0], start[1] + 1)


def test_holding_down_falls_every_frame(scripted):
    game = Tetris(rng=scripted())
    game.handle_pressed_key('s')
    assert game.falling.origin == (3, -1)
    game.run_frame()
    assert game.falling.origin == (3, 0)
    game.handle_released_key('s')
    game.run_frame()
    assert game.falling.origin == (3, 0)


def test_moves_stop_at_walls(scripted):
    game = Tetris(rng=scripted())
    for _ in range(10):
        game.handle_pressed_key('a')
    assert game.falling.origin == (0, -2)
    for _ in range(10):
        game.handle_pressed_key('d')
    assert game.falling.origin == (6, -2)
    assert game.grid.occupied_count() == 4


def test_rotation_blocked_above_the_board(scripted):
    game = Tetris(rng=scripted())
    assert not game.rotate_if_possible()
    assert game.falling.orientation == 0


def test_rotation_uses_wall_kick(scripted):
    game = Tetris(rng=scripted())
    soft_drop(game, 2)
    assert game.falling.origin == (3, 0)

    game.handle_pressed_key('w')
    assert game.falling.orientation == 1
    assert game.falling.blocks() == [(5, 0), (5, 1), (5, 2), (5, 3)]

    for _ in range(5):
        game.handle_pressed_key('d')
    assert game.falling.origin == (7, 0)

    game.handle_pressed_key('w')
    assert game.falling.orientation == 2
    assert game.falling.origin == (6, 0)
    assert game.falling.blocks() == [(6, 2), (7, 2), (8, 2), (9, 2)]
    assert game.grid.occupied_count() == 4


def test_piece_lands_and_next_spawns(scripted):
    game = Tetris(rng=scripted())
    soft_drop(game, 20)
    for x in range(3, 7):
        assert game.grid.get_cell((x, 19)) is not None
    assert game.falling.origin == (3, -2)
    assert game.grid.occupied_count() == 8


def test_complete_row_is_removed(scripted):
    game = Tetris(rng=scripted())
    for x in range(10):
        game.grid.set_cell((x, 19), BLOCK)
    game.grid.set_cell((0, 18), BLOCK)

    assert game.remove_any_complete_rows() == 1

    assert game.score == 1
    assert game.grid.get_cell((0, 19)) == BLOCK
    assert all(game.grid.get_cell((x, 19)) is None for x in range(1, 10))
    assert all(game.grid.get_cell((x, 18)) is None for x in range(10))
    assert game.graphics.side_panel.text_item(0).text == "Score: 1"


def test_two_rows_speed_up_the_fall(scripted):
    game = Tetris(rng=scripted())
    for y in (18, 19):
        for x in range(10):
            game.grid.set_cell((x, y), BLOCK)
    game.grid.set_cell((9, 17), BLOCK)

    assert game.remove_any_complete_rows() == 2

    assert game.score == 2
    assert game.fall_delay == constants.TETRIS_FALL_DELAY - 1
    assert game.grid.get_cell((9, 19)) == BLOCK
    assert game.grid.get_cell((9, 17)) is None


def test_game_over_when_next_piece_has_no_room(scripted):
    game = Tetris(rng=scripted())
    game.spawn_next()

    assert game.game_over
    assert game.graphics.side_panel.text_item(0).text == "Game over.\nScore: 0"

    snapshot = [cell for _, cell in game.grid]
    game.run_frame()
    game.handle_pressed_key('a')
    assert [cell for _, cell in game.grid] == snapshot


def test_pieces_pile_up_until_game_over():
    game = Tetris(rng=random.Random(5))
    game.handle_pressed_key('s')
    for _ in range(2000):
        game.run_frame()
        if game.game_over:
            break
    assert game.game_over
