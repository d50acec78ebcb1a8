import numpy as np
from collections import namedtuple

MAX_DIMENSION = 255


class Cell(namedtuple('Cell', ['color', 'symbol'])):
    """A painted grid cell: an RGB color and an optional terminal symbol."""
    __slots__ = ()

    def __new__(cls, color, symbol=None):
        return super().__new__(cls, tuple(color), symbol)


def filled():
    """Return the plain white cell used by the automaton screens."""
    return Cell((255, 255, 255))


class Grid:
    """Fixed-size grid of cells addressed by (x, y); None marks an empty cell."""
    def __init__(self, width, height):
        """Initialize an empty grid with the given width and height in cells."""
        if not (1 <= width <= MAX_DIMENSION and 1 <= height <= MAX_DIMENSION):
            raise ValueError(f"Grid dimensions must be within 1..{MAX_DIMENSION}, got {width}x{height}")
        self.columns = width
        self.rows = height
        self.cells = [[None for _ in range(self.columns)] for _ in range(self.rows)]
        self._occupancy_cache = None
        self._cache_dirty = True

    def _mark_cache_dirty(self):
        """Mark the cached occupancy mask as dirty."""
        self._cache_dirty = True

    def occupancy(self):
        """Return a cached boolean mask of occupied cells, rebuilding if needed.

        The mask is indexed [row, column], i.e. [y, x].
        """
        if self._cache_dirty or self._occupancy_cache is None:
            self._occupancy_cache = np.array(
                [[cell is not None for cell in row] for row in self.cells], dtype=bool
            )
            self._cache_dirty = False
        return self._occupancy_cache

    def occupied_count(self):
        """Return the number of non-empty cells."""
        return int(self.occupancy().sum())

    def dimensions(self):
        """Return (width, height) in cells."""
        return self.columns, self.rows

    def is_position_valid(self, point):
        """Check if the given (x, y) point lies within grid bounds."""
        x, y = point
        return 0 <= x < self.columns and 0 <= y < self.rows

    def is_cell_empty(self, point):
        """Check if the cell at the point is empty; outside the grid counts as occupied."""
        return self.is_position_valid(point) and self.cells[point[1]][point[0]] is None

    def get_cell(self, point):
        """Get the cell at the point, or None if it is empty or out of range."""
        if self.is_position_valid(point):
            return self.cells[point[1]][point[0]]
        return None

    def set_cell(self, point, cell):
        """Set the cell at the point. Writing outside the grid is a programming error."""
        if not self.is_position_valid(point):
            raise IndexError(f"Point {point} outside grid of size {self.dimensions()}")
        self.cells[point[1]][point[0]] = cell
        self._mark_cache_dirty()

    def remove_cell(self, point):
        """Clear and return the cell at the point."""
        cell = self.get_cell(point)
        self.set_cell(point, None)
        return cell

    def _point_for_index(self, index):
        if not 0 <= index < self.columns * self.rows:
            raise IndexError(f"Index {index} outside grid of size {self.dimensions()}")
        return index % self.columns, index // self.columns

    def get_by_index(self, index):
        """Get the cell at a row-major index."""
        return self.get_cell(self._point_for_index(index))

    def set_by_index(self, index, cell):
        """Set the cell at a row-major index."""
        self.set_cell(self._point_for_index(index), cell)

    def fill(self, cell):
        """Paint every cell with the same value."""
        for row in range(self.rows):
            for column in range(self.columns):
                self.cells[row][column] = cell
        self._mark_cache_dirty()

    def clear(self):
        """Clear all cells from the grid."""
        self.fill(None)

    def __iter__(self):
        """Yield ((x, y), cell) for every position, row by row."""
        for y in range(self.rows):
            for x in range(self.columns):
                yield (x, y), self.cells[y][x]
