import constants
from grid import Cell

SOLID = Cell(constants.SOLID_COLOR)


class Particle:
    """Sand particle with a color, an integer position and an integer velocity."""
    __slots__ = ('color', 'position', 'velocity')

    def __init__(self, color, position, velocity):
        """Initialize particle color, position (x, y) and velocity [vx, vy]."""
        self.color = tuple(color)
        self.position = tuple(position)
        self.velocity = list(velocity)

    def cell(self):
        """Return the grid cell that paints this particle."""
        return Cell(self.color)

    def is_at_rest(self):
        return self.velocity == [0, 0]

    def __repr__(self):
        return f"Particle(color={self.color}, position={self.position}, velocity={self.velocity})"


def random_color(rng):
    """Pick a particle color from the fixed palette."""
    return rng.choice(constants.PARTICLE_COLORS)
