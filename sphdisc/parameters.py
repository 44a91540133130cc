"""Simulation parameters and the constants derived from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vec3 import Vec3


@dataclass
class Parameters:
    """Scales, physical constants and time settings of a simulation.

    Units are km/s, pc, solar masses and Myr.
    """

    h: float = 0.1
    particle_count: int = 16 * 1024
    examine_count: int = 32
    grid_cells_x: int = 32
    grid_cells_y: int = 32
    grid_cells_z: int = 32
    simulation_scale: float = 1.0
    cfl_limit: float = 1e4
    time_total: float = 1.0
    time_step: float = 1e-3
    rho0: float = 100.0
    stiffness: float = 0.1
    gravity: Vec3 = field(default_factory=Vec3)
    viscosity: float = 100.0
    damping: float = 0.001
    grav_constant: float = 4.3009e-3
    central_mass: float = 1e5
    particle_mass: float = 1.0
    sphere_radius: float = 2.0

    def __post_init__(self) -> None:
        if self.h <= 0:
            raise ValueError("h must be positive")
        if self.particle_count < 0:
            raise ValueError("particle_count must not be negative")
        if self.examine_count < 1:
            raise ValueError("examine_count must be at least 1")
        if min(self.grid_cells_x, self.grid_cells_y, self.grid_cells_z) < 1:
            raise ValueError("grid cell counts must be at least 1")
        if self.simulation_scale <= 0:
            raise ValueError("simulation_scale must be positive")
        if self.time_step <= 0:
            raise ValueError("time_step must be positive")

    @property
    def h2(self) -> float:
        return self.h * self.h

    @property
    def h_times2(self) -> float:
        return self.h * 2.0

    @property
    def h_scaled(self) -> float:
        return self.h * self.simulation_scale

    @property
    def h_scaled2(self) -> float:
        return self.h_scaled ** 2

    @property
    def kernel1(self) -> float:
        """Density (poly6) kernel coefficient."""
        return 315.0 / (64.0 * math.pi * self.h_scaled ** 9)

    @property
    def kernel2(self) -> float:
        """Pressure gradient (spiky) kernel coefficient."""
        return -45.0 / (math.pi * self.h_scaled ** 6)

    @property
    def kernel3(self) -> float:
        """Viscosity kernel coefficient."""
        return -self.kernel2

    @property
    def cfl_limit2(self) -> float:
        return self.cfl_limit * self.cfl_limit

    @property
    def cell_size(self) -> float:
        return 2.0 * self.h

    @property
    def bounds(self) -> tuple[float, float, float]:
        return (
            self.cell_size * self.grid_cells_x,
            self.cell_size * self.grid_cells_y,
            self.cell_size * self.grid_cells_z,
        )

    @property
    def central_position(self) -> Vec3:
        max_x, max_y, max_z = self.bounds
        return Vec3(max_x * 0.5, max_y * 0.5, max_z * 0.5)

    @property
    def softening(self) -> float:
        return self.h_scaled * 0.5

    @property
    def total_steps(self) -> int:
        return int(math.floor(self.time_total / self.time_step + 0.5))

    @property
    def grid_cell_count(self) -> int:
        return self.grid_cells_x * self.grid_cells_y * self.grid_cells_z