"""Initial particle configurations."""

from __future__ import annotations

import math
import random

from .parameters import Parameters
from .particle import Particle
from .vec3 import Vec3


def sphere_particles(params: Parameters, rng: random.Random) -> list[Particle]:
    """Place particles uniformly in a sphere around the box centre.

    Each particle rotates about the vertical (y) axis with speed falling off
    as the inverse square root of its distance, plus a random vertical
    velocity bounded by that distance.
    """
    if params.sphere_radius <= 0:
        raise ValueError("sphere_radius must be positive")

    centre = params.central_position
    span_x = params.grid_cells_x * params.h_times2
    span_y = params.grid_cells_y * params.h_times2
    span_z = params.grid_cells_z * params.h_times2

    def sample_position() -> tuple[Vec3, float]:
        while True:
            x = rng.random() * span_x
            y = rng.random() * span_y
            z = rng.random() * span_z
            if x == float(params.grid_cells_x):
                x -= 0.00001
            if y == float(params.grid_cells_y):
                y -= 0.00001
            if z == float(params.grid_cells_z):
                z -= 0.00001
            position = Vec3(x, y, z)
            distance = (position - centre).length()
            if distance <= params.sphere_radius:
                return position, distance

    particles = []
    for _ in range(params.particle_count):
        position, distance = sample_position()
        phi = math.atan2(position.z - centre.z, position.x - centre.x)
        speed = 20.0 * (distance + params.h_scaled * 0.5) ** -0.5
        vertical = distance * (rng.random() * 2.0 - 1.0)
        particles.append(
            Particle(
                position=position,
                velocity=Vec3(speed * -math.sin(phi), vertical, speed * math.cos(phi)),
                mass=params.particle_mass,
            )
        )
    return particles