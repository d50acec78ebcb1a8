import logging

import constants
from app import App, Graphics, SidePanel, TextItem
from grid import Grid
from particle import SOLID, Particle, random_color

logger = logging.getLogger(f"{constants.LOGGER_NAME}.particles")

HELP_TEXT = "Control spawn rate with 'W' and 'S'\nControl spawn velocity with 'A' and 'D'"


class SimulationInvariantError(RuntimeError):
    """Raised when the collision resolver reaches a state it cannot explain."""


def sign(value):
    return (value > 0) - (value < 0)


class Simulation(App):
    """Falling-sand particle simulation on a small grid with static solid walls."""
    frame_rate = constants.PARTICLES_FRAME_RATE

    def __init__(self, rng=None, dimensions=constants.PARTICLES_DIMENSIONS,
                 solid_cells=constants.SOLID_CELLS):
        """Initialize the grid, paint the solid walls and start with no particles."""
        super().__init__(rng)
        self.grid = Grid(*dimensions)
        for point in solid_cells:
            self.grid.set_cell(point, SOLID)
        self.frame = 0
        self.particles = []
        self.spawn_rate = constants.INITIAL_SPAWN_RATE
        self.spawn_velocity = list(constants.INITIAL_SPAWN_VELOCITY)
        self.graphics = Graphics(
            "Particles",
            self.grid,
            SidePanel([TextItem(), TextItem(HELP_TEXT)]),
        )
        self.update_info_text()

    def is_free(self, point):
        """Return True if the cell is inside the grid and empty."""
        return self.grid.is_cell_empty(point)

    def chance(self, probability):
        return self.rng.random() < probability

    def run_frame(self):
        """Advance one tick: movement pass, forces pass, then spawning."""
        self.frame += 1
        self.move_particles()
        self.apply_forces()
        self.spawn()
        self.update_info_text()

    def move_particles(self):
        """Move every particle towards position + velocity, one unit step at a time."""
        for particle in self.particles:
            self.move_particle(particle)

    def move_particle(self, particle):
        """Raycast a single particle against the grid and commit its rest position."""
        x, y = particle.position
        x0, y0 = x, y
        x_dst = x + particle.velocity[0]
        y_dst = y + particle.velocity[1]

        collision = False
        while not collision and (x0, y0) != (x_dst, y_dst):
            dx = x_dst - x0
            dy = y_dst - y0
            next_x = x0 + sign(dx)
            next_y = y0 + sign(dy)
            can_move_hor = dx != 0 and self.is_free((next_x, y0))
            can_move_vert = dy != 0 and self.is_free((x0, next_y))

            if abs(dx) > abs(dy) and can_move_hor:
                x0 = next_x
            elif abs(dy) > abs(dx) and can_move_vert:
                y0 = next_y
            elif self.is_free((next_x, next_y)):
                x0, y0 = next_x, next_y
            elif can_move_hor:
                x0 = next_x
            elif can_move_vert:
                y0 = next_y
            else:
                collision = True
                if x0 != x_dst:
                    # bounce horizontally
                    particle.velocity[0] = int(particle.velocity[0] * -constants.BOUNCE_DAMPING)
                elif y0 != y_dst:
                    particle.velocity[1] = 0
                else:
                    raise SimulationInvariantError(
                        f"Collision at destination {(x_dst, y_dst)} for {particle!r}"
                    )

        if (x0, y0) != (x, y):
            self.grid.remove_cell((x, y))
            self.grid.set_cell((x0, y0), particle.cell())
            particle.position = (x0, y0)

    def apply_forces(self):
        """Adjust every particle's velocity for gravity, friction and spreading."""
        for particle in self.particles:
            self.apply_force(particle)

    def apply_force(self, particle):
        x, y = particle.position
        velocity = particle.velocity

        if self.is_free((x, y + 1)):
            # Gravity (straight down)
            velocity[1] += 1
            if self.chance(constants.GRAVITY_BONUS_CHANCE):
                # to make things look less static
                velocity[1] += 1
        elif velocity[0] != 0 and self.chance(constants.FRICTION_CHANCE):
            # Friction
            velocity[0] = (abs(velocity[0]) - 1) * sign(velocity[0])

        if not particle.is_at_rest():
            return

        # Gravity (diagonally)
        for dx in self.rng.choice([[-1, 1], [1, -1]]):
            if self.is_free((x + dx, y + 1)):
                particle.velocity = [dx, 1]
                return

        # Side-way movement (from forces or by chance)
        left_free = self.is_free((x - 1, y))
        right_free = self.is_free((x + 1, y))
        if left_free and not right_free:
            velocity[0] = -1
        elif right_free and not left_free:
            velocity[0] = 1
        elif self.is_liquid((x, y + 1)):
            # If above liquid, sometimes move side-way by chance
            if self.chance(constants.LIQUID_DRIFT_CHANCE):
                dx = self.rng.choice([-1, 1])
                if self.is_free((x + dx, y)):
                    velocity[0] = dx

    def is_liquid(self, point):
        """Return True if the cell holds something that is neither empty nor a solid wall."""
        cell = self.grid.get_cell(point)
        return cell is not None and cell != SOLID

    def spawn(self):
        """With probability spawn_rate, drop one particle into a random spawn slot."""
        if not self.chance(self.spawn_rate):
            return None
        position = self.rng.choice(constants.SPAWN_POSITIONS)
        color = random_color(self.rng)
        if not self.is_free(position):
            logger.debug(f"Spawn slot {position} occupied, skipping")
            return None
        particle = Particle(color, position, self.spawn_velocity)
        self.add_particle(particle)
        return particle

    def add_particle(self, particle):
        """Add a particle to the store and paint its cell if that cell is empty."""
        if not self.is_free(particle.position):
            return False
        self.grid.set_cell(particle.position, particle.cell())
        self.particles.append(particle)
        return True

    def handle_pressed_key(self, key):
        """Adjust spawn rate with w/s and horizontal spawn velocity with a/d."""
        if key == 'w':
            self.spawn_rate = min(round(self.spawn_rate + constants.SPAWN_RATE_STEP, 2), 1.0)
        elif key == 's':
            self.spawn_rate = max(round(self.spawn_rate - constants.SPAWN_RATE_STEP, 2), 0.0)
        elif key == 'a':
            self.spawn_velocity[0] = max(self.spawn_velocity[0] - 1, constants.MIN_SPAWN_SPEED)
        elif key == 'd':
            self.spawn_velocity[0] = min(self.spawn_velocity[0] + 1, constants.MAX_SPAWN_SPEED)
        else:
            return
        logger.debug(f"Spawn rate {self.spawn_rate:.2f}, spawn velocity {self.spawn_velocity}")
        self.update_info_text()

    def status_text(self):
        return (
            f"Particles: {len(self.particles)}\n"
            f"Spawn rate: {self.spawn_rate:.2f}\n"
            f"Spawn velocity: {self.spawn_velocity}"
        )

    def update_info_text(self):
        self.graphics.side_panel.set_text(0, self.status_text())

