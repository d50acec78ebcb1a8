import pytest

import constants
from race import CAR, CRASH, CURSOR, OBSTACLE, MapError, Race, load_map, minimap_size, parse_map

MAP = [
    "xxxxxxxx",
    "x......x",
    "x. o  .x",
    "x......x",
    "xxxxxxxx",
]


def drive(game, frames):
    for _ in range(frames):
        game.run_frame()


def test_parse_map():
    world = parse_map(MAP)
    assert world.car == (3, 2)
    assert world.dimensions == (7, 4)
    assert (0, 0) in world.obstacles
    assert (1, 1) in world.grass
    assert (4, 2) not in world.grass


def test_map_needs_exactly_one_car():
    with pytest.raises(MapError):
        parse_map(["xxx", "x.x"])
    with pytest.raises(MapError):
        parse_map(["xox", "xox"])


def test_default_map_loads():
    world = load_map()
    assert world.car == (6, 18)
    assert world.dimensions == (63, 35)


@pytest.mark.parametrize("dimensions, expected", [((20, 10), (8, 4)), ((10, 20), (4, 8)), ((63, 35), (8, 4))])
def test_minimap_size(dimensions, expected):
    assert minimap_size(dimensions) == expected


def test_viewport_is_centred_on_the_car():
    game = Race(world=parse_map(MAP))
    # the idle cursor sits on the car while it blinks
    assert game.grid.get_cell(constants.RACE_POS_ON_SCREEN) == CURSOR
    drive(game, constants.RACE_CURSOR_VISIBLE)
    assert game.grid.get_cell(constants.RACE_POS_ON_SCREEN) == CAR
    assert game.grid.get_cell((11, 12)) == OBSTACLE
    minimap = game.graphics.side_panel.graphics_item(2)
    assert minimap.dimensions() == (8, 4)


def test_car_moves_every_interval():
    game = Race(world=parse_map(MAP))
    game.handle_pressed_key('d')
    drive(game, constants.RACE_MOVE_INTERVAL - 1)
    assert game.world.car == (3, 2)
    drive(game, 1)
    assert game.world.car == (4, 2)
    assert game.velocity == [1, 0]
    assert game.cursor.direction == [0, 0]
    assert game.graphics.side_panel.text_item(0).text == "Time: 1"


def test_crash_into_obstacle():
    game = Race(world=parse_map(MAP))
    game.handle_pressed_key('d')
    drive(game, constants.RACE_MOVE_INTERVAL)
    game.handle_pressed_key('d')
    drive(game, constants.RACE_MOVE_INTERVAL)
    assert game.world.car == (6, 2)
    assert not game.crashed

    drive(game, constants.RACE_MOVE_INTERVAL)

    assert game.crashed
    assert game.world.car == (7, 2)
    assert game.grid.get_cell(constants.RACE_POS_ON_SCREEN) == CRASH
    assert game.graphics.side_panel.text_item(3).text == "Game Over:\nYou crashed!"

    drive(game, constants.RACE_MOVE_INTERVAL)
    assert game.graphics.side_panel.text_item(0).text == "Time: 3"


def test_cursor_blinks():
    game = Race(world=parse_map(MAP))
    game.handle_pressed_key('w')
    target = (constants.RACE_POS_ON_SCREEN[0], constants.RACE_POS_ON_SCREEN[1] - 1)
    drive(game, 1)
    assert game.grid.get_cell(target) == CURSOR
    drive(game, constants.RACE_CURSOR_VISIBLE - 1)
    assert game.grid.get_cell(target) != CURSOR


def test_direction_is_clamped():
    game = Race(world=parse_map(MAP))
    for _ in range(3):
        game.handle_pressed_key('a')
        game.handle_pressed_key('s')
    assert game.cursor.direction == [-1, 1]
