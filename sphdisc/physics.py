"""Smoothed-particle hydrodynamics and central-mass gravity for one particle."""

from __future__ import annotations

import math
from typing import Sequence

from .parameters import Parameters
from .particle import Particle
from .vec3 import Vec3

_AXIS_NORMALS = (Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 1.0))


def compute_density(
    particle: Particle, neighbors: Sequence[Particle], params: Parameters
) -> list[float]:
    """Set ``particle.density`` from its neighbours with the poly6 kernel.

    Returns the scaled distance to each neighbour, in the order given.
    """
    h_scaled = params.h_scaled
    h_scaled2 = params.h_scaled2
    kernel1 = params.kernel1
    density = 0.0
    distances: list[float] = []
    for neighbor in neighbors:
        if neighbor is particle:
            distances.append(0.0)
            continue
        distance = (particle.position - neighbor.position).length() * params.simulation_scale
        distances.append(distance)
        if distance <= h_scaled:
            right = h_scaled2 - distance * distance
            density += neighbor.mass * kernel1 * right * right * right
    particle.density = density
    return distances


def central_gravity(position: Vec3, params: Parameters) -> Vec3:
    """Return the softened acceleration towards the central mass."""
    offset = (position - params.central_position) * params.simulation_scale
    distance3 = (offset.length() + params.softening) ** 3
    return offset / distance3 * (-params.grav_constant * params.central_mass)


def compute_acceleration(
    particle: Particle,
    neighbors: Sequence[Particle],
    distances: Sequence[float],
    params: Parameters,
) -> Vec3:
    """Set and return ``particle.acceleration`` from pressure, viscosity and gravity.

    The result is scaled down to the CFL limit when it exceeds it.
    """
    rho0 = params.rho0
    stiffness = params.stiffness
    h_scaled = params.h_scaled
    kernel2 = params.kernel2
    kernel3 = params.kernel3

    rho_i_inv = 1.0 / particle.density if particle.density > 0.0 else 1.0
    pressure_i = (particle.density - rho0) * stiffness
    pressure_div_rho_i2 = pressure_i * rho_i_inv * rho_i_inv

    pressure_gradient = Vec3()
    viscous_term = Vec3()
    for neighbor, distance in zip(neighbors, distances, strict=True):
        pressure_j = (neighbor.density - rho0) * stiffness
        rho_j_inv = 1.0 / neighbor.density if neighbor.density > 0.0 else 1.0
        mass_j = neighbor.mass

        # Coincident particles have no defined direction: no pressure push.
        if distance > 0.0:
            offset = (particle.position - neighbor.position) * params.simulation_scale
            centre = (h_scaled - distance) ** 2
            factor = mass_j * pressure_div_rho_i2 * (pressure_j * rho_j_inv * rho_j_inv)
            pressure_gradient = pressure_gradient + offset / distance * (kernel2 * centre * factor)

        weight = rho_j_inv * mass_j * kernel3 * (h_scaled - distance)
        viscous_term = viscous_term + (neighbor.velocity - particle.velocity) * weight

    viscous_term = viscous_term * (params.viscosity * rho_i_inv)
    acceleration = viscous_term - pressure_gradient + central_gravity(particle.position, params)

    magnitude2 = acceleration.length2()
    if magnitude2 > params.cfl_limit2:
        acceleration = acceleration * (params.cfl_limit / math.sqrt(magnitude2))

    particle.acceleration = acceleration
    return acceleration


def integrate(particle: Particle, params: Parameters) -> None:
    """Advance position and velocity by one kick-drift-kick leapfrog step."""
    dt = params.time_step
    position_step = dt / params.simulation_scale
    half_velocity = particle.velocity + particle.acceleration * (dt * 0.5)
    new_position = particle.position + half_velocity * position_step
    new_velocity = half_velocity + central_gravity(new_position, params) * dt
    particle.velocity = new_velocity
    particle.position = new_position


def apply_boundary(
    position: Vec3,
    time_step: float,
    intersection_distance: float,
    normal: Vec3,
    velocity: Vec3,
    damping: float,
) -> tuple[Vec3, Vec3]:
    """Reflect ``velocity`` off a wall; return the new position and velocity."""
    intersection = position + velocity * intersection_distance
    reflection = velocity - normal * (velocity.dot(normal) * 2.0)
    remaining = time_step - intersection_distance
    return intersection + reflection * (remaining * damping), reflection


def handle_boundary_conditions(
    position: Vec3,
    velocity: Vec3,
    new_position: Vec3,
    time_step: float,
    params: Parameters,
) -> tuple[Vec3, Vec3]:
    """Bounce a moved particle off the box walls; return position and velocity."""
    for axis, upper, normal in zip("xyz", params.bounds, _AXIS_NORMALS):
        start = getattr(position, axis)
        moved = getattr(new_position, axis)
        speed = getattr(velocity, axis)
        if moved < 0.0:
            distance = -start / speed
            wall_normal = normal
        elif moved > upper:
            distance = (upper - start) / speed
            wall_normal = -normal
        else:
            continue
        new_position, velocity = apply_boundary(
            position, time_step, distance, wall_normal, velocity, params.damping
        )
    return new_position, velocity