import pytest

from grid import Cell, Grid, filled

RED = Cell((255, 0, 0))


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (256, 1), (1, 256)])
def test_rejects_bad_dimensions(width, height):
    with pytest.raises(ValueError):
        Grid(width, height)


def test_out_of_range_reads_are_empty_but_not_free():
    grid = Grid(3, 2)
    assert grid.get_cell((-1, 0)) is None
    assert grid.get_cell((3, 0)) is None
    assert not grid.is_cell_empty((0, 2))
    assert grid.is_cell_empty((2, 1))


def test_out_of_range_writes_raise():
    grid = Grid(3, 2)
    with pytest.raises(IndexError):
        grid.set_cell((3, 1), RED)
    with pytest.raises(IndexError):
        grid.set_by_index(6, RED)


def test_set_get_remove():
    grid = Grid(3, 2)
    grid.set_cell((2, 1), RED)
    assert grid.get_cell((2, 1)) == RED
    assert not grid.is_cell_empty((2, 1))
    assert grid.remove_cell((2, 1)) == RED
    assert grid.is_cell_empty((2, 1))


def test_index_is_row_major():
    grid = Grid(5, 3)
    grid.set_by_index(7, RED)
    assert grid.get_cell((2, 1)) == RED
    assert grid.get_by_index(7) == RED


def test_occupancy_follows_mutations():
    grid = Grid(4, 3)
    assert grid.occupancy().shape == (3, 4)
    assert grid.occupied_count() == 0
    grid.set_cell((3, 0), RED)
    assert grid.occupancy()[0, 3]
    assert grid.occupied_count() == 1
    grid.fill(filled())
    assert grid.occupied_count() == 12
    grid.clear()
    assert grid.occupied_count() == 0


def test_iterates_every_position():
    grid = Grid(2, 2)
    grid.set_cell((1, 0), RED)
    assert list(grid) == [((0, 0), None), ((1, 0), RED), ((0, 1), None), ((1, 1), None)]


def test_cells_compare_by_value():
    assert Cell([1, 2, 3]) == Cell((1, 2, 3))
    assert Cell((1, 2, 3), '#') != Cell((1, 2, 3))
    assert filled().color == (255, 255, 255)
