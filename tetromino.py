from app import translated

SHAPES = ['I', 'O', 'T', 'S', 'Z', 'J', 'L']

FIRST, SECOND, THIRD, FOURTH = range(4)

# Block offsets inside the piece's 4x4 box, one table per orientation.
TETROMINO_BLOCKS = {
    'I': [
        [(0, 2), (1, 2), (2, 2), (3, 2)],
        [(2, 0), (2, 1), (2, 2), (2, 3)],
        [(0, 2), (1, 2), (2, 2), (3, 2)],
        [(2, 0), (2, 1), (2, 2), (2, 3)],
    ],
    'O': [[(0, 0), (1, 0), (0, 1), (1, 1)]] * 4,
    'T': [
        [(0, 1), (1, 1), (2, 1), (1, 2)],
        [(0, 1), (1, 0), (1, 1), (1, 2)],
        [(0, 1), (1, 1), (2, 1), (1, 0)],
        [(2, 1), (1, 0), (1, 1), (1, 2)],
    ],
    'S': [
        [(0, 2), (1, 2), (1, 1), (2, 1)],
        [(1, 0), (1, 1), (2, 1), (2, 2)],
        [(0, 2), (1, 2), (1, 1), (2, 1)],
        [(1, 0), (1, 1), (2, 1), (2, 2)],
    ],
    'Z': [
        [(0, 1), (1, 1), (1, 2), (2, 2)],
        [(1, 2), (1, 1), (2, 1), (2, 0)],
        [(0, 1), (1, 1), (1, 2), (2, 2)],
        [(1, 2), (1, 1), (2, 1), (2, 0)],
    ],
    'J': [
        [(0, 1), (1, 1), (2, 1), (2, 2)],
        [(0, 2), (1, 2), (1, 1), (1, 0)],
        [(0, 0), (0, 1), (1, 1), (2, 1)],
        [(1, 2), (1, 1), (1, 0), (2, 0)],
    ],
    'L': [
        [(0, 2), (0, 1), (1, 1), (2, 1)],
        [(0, 0), (1, 0), (1, 1), (1, 2)],
        [(0, 1), (1, 1), (2, 1), (2, 0)],
        [(1, 0), (1, 1), (1, 2), (2, 2)],
    ],
}

TETROMINO_COLORS = {
    'I': (235, 50, 50),
    'O': (50, 235, 50),
    'T': (80, 80, 235),
    'S': (170, 170, 50),
    'Z': (50, 170, 170),
    'J': (170, 50, 170),
    'L': (200, 100, 100),
}

SPAWN_ORIGINS = {
    'I': (3, -2),
    'O': (4, 0),
    'T': (4, -1),
    'S': (4, -1),
    'Z': (4, -1),
    'J': (4, -1),
    'L': (4, -1),
}

# SRS clockwise kick tests keyed by the orientation being left. Offsets are
# in SRS convention (y up) and get flipped when applied to the board.
JLSTZ_WALL_KICKS = {
    FIRST: [(0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)],
    SECOND: [(0, 0), (1, 0), (1, -1), (0, 2), (1, 2)],
    THIRD: [(0, 0), (1, 0), (1, 1), (0, -2), (1, -2)],
    FOURTH: [(0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)],
}

I_WALL_KICKS = {
    FIRST: [(0, 0), (-2, 0), (1, 0), (-2, -1), (1, 2)],
    SECOND: [(0, 0), (-1, 0), (2, 0), (-1, 2), (2, -1)],
    THIRD: [(0, 0), (2, 0), (-1, 0), (2, 1), (-1, -2)],
    FOURTH: [(0, 0), (1, 0), (-2, 0), (1, -2), (-2, 1)],
}


class Tetromino:
    """Immutable falling piece: a shape, an orientation and an origin on the board."""
    __slots__ = ('shape', 'orientation', 'origin')

    def __init__(self, shape, orientation=FIRST, origin=None):
        """Initialize a piece; without an origin it is placed at its spawn position."""
        if shape not in TETROMINO_BLOCKS:
            raise ValueError(f"Unknown tetromino shape: {shape!r}")
        self.shape = shape
        self.orientation = orientation % 4
        self.origin = SPAWN_ORIGINS[shape] if origin is None else tuple(origin)

    @classmethod
    def at_top(cls, shape):
        return cls(shape)

    def blocks(self):
        """Return the four board points covered by this piece."""
        ox, oy = self.origin
        return [(ox + dx, oy + dy) for dx, dy in TETROMINO_BLOCKS[self.shape][self.orientation]]

    def local_blocks(self):
        """Return the block offsets of the current orientation, relative to the box."""
        return list(TETROMINO_BLOCKS[self.shape][self.orientation])

    def color(self):
        return TETROMINO_COLORS[self.shape]

    def translated(self, direction):
        """Return a copy moved one cell in the named direction."""
        return Tetromino(self.shape, self.orientation, translated(self.origin, direction))

    def shifted(self, dx, dy):
        return Tetromino(self.shape, self.orientation, (self.origin[0] + dx, self.origin[1] + dy))

    def rotated(self):
        """Return a copy turned clockwise in place, without any wall kick."""
        return Tetromino(self.shape, self.orientation + 1, self.origin)

    def kicks(self):
        """Return the board offsets to try, in order, when rotating clockwise."""
        if self.shape == 'O':
            return [(0, 0)]
        table = I_WALL_KICKS if self.shape == 'I' else JLSTZ_WALL_KICKS
        return [(kx, -ky) for kx, ky in table[self.orientation]]

    def __eq__(self, other):
        if not isinstance(other, Tetromino):
            return NotImplemented
        return (self.shape, self.orientation, self.origin) == (other.shape, other.orientation, other.origin)

    def __hash__(self):
        return hash((self.shape, self.orientation, self.origin))

    def __repr__(self):
        return f"Tetromino({self.shape!r}, orientation={self.orientation}, origin={self.origin})"


def generate_next(rng):
    """Pick a random shape and place it at its spawn position."""
    return Tetromino.at_top(rng.choice(SHAPES))
