"""Uniform voxel grid used for neighbour search."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from .parameters import Parameters
from .particle import Particle
from .vec3 import Vec3


@dataclass(frozen=True, slots=True)
class VoxelCoord:
    """Integer coordinates of a grid cell."""

    x: int
    y: int
    z: int


def is_neighbor(current: Particle, neighbor: Particle, h2: float) -> bool:
    """Tell whether ``neighbor`` is a different particle closer than sqrt(h2)."""
    if current is neighbor:
        return False
    offset = current.position - neighbor.position
    return offset.dot(offset) < h2


class Grid:
    """Particles bucketed into cubic cells of side 2h."""

    def __init__(self, params: Parameters) -> None:
        self._cells_x = params.grid_cells_x
        self._cells_y = params.grid_cells_y
        self._cells_z = params.grid_cells_z
        self._h = params.h
        self._h2 = params.h2
        self._h_times2 = params.h_times2
        self._h_times2_inv = 1.0 / params.h_times2
        self._examine_count = params.examine_count
        self._cells: list[list[Particle]] = [[] for _ in range(params.grid_cell_count)]

    def clear(self) -> None:
        """Empty every cell."""
        for cell in self._cells:
            cell.clear()

    def voxel_coord(self, position: Vec3) -> VoxelCoord:
        """Return the cell holding ``position``, clamped to the grid."""

        def axis(value: float, cells: int) -> int:
            index = math.floor(value * self._h_times2_inv)
            return min(max(index, 0), cells - 1)

        return VoxelCoord(
            axis(position.x, self._cells_x),
            axis(position.y, self._cells_y),
            axis(position.z, self._cells_z),
        )

    def voxel_id(self, x: int, y: int, z: int) -> int:
        """Return the flat index of cell ``(x, y, z)``."""
        return (z * self._cells_y + y) * self._cells_x + x

    def voxelize(self, particles: Iterable[Particle]) -> list[VoxelCoord]:
        """Rebuild the grid from ``particles``; return each particle's cell."""
        self.clear()
        coords = []
        for particle in particles:
            coord = self.voxel_coord(particle.position)
            coords.append(coord)
            self._cells[self.voxel_id(coord.x, coord.y, coord.z)].append(particle)
        return coords

    def cell(self, voxel_id: int) -> tuple[Particle, ...]:
        """Return the particles in the cell with flat index ``voxel_id``."""
        return tuple(self._cells[voxel_id])

    def cell_counts(self) -> tuple[int, int, int]:
        """Return the number of cells along each axis."""
        return self._cells_x, self._cells_y, self._cells_z

    def _search_cells(self, position: Vec3, voxel: VoxelCoord) -> list[VoxelCoord]:
        def step(orientation: float) -> int:
            return 1 if orientation > self._h else -1

        dx = step(position.x - voxel.x * self._h_times2)
        dy = step(position.y - voxel.y * self._h_times2)
        dz = step(position.z - voxel.z * self._h_times2)
        offsets = [
            (0, 0, 0),
            (dx, 0, 0),
            (0, dy, 0),
            (0, 0, dz),
            (dx, dy, 0),
            (dx, 0, dz),
            (0, dy, dz),
            (dx, dy, dz),
        ]
        return [VoxelCoord(voxel.x + ox, voxel.y + oy, voxel.z + oz) for ox, oy, oz in offsets]

    def _inside(self, coord: VoxelCoord) -> bool:
        # Cells with a zero index on any axis are never searched.
        return (
            0 < coord.x < self._cells_x
            and 0 < coord.y < self._cells_y
            and 0 < coord.z < self._cells_z
        )

    def find_neighbors(
        self,
        particle: Particle,
        particle_index: int,
        voxel: VoxelCoord,
        rng: random.Random,
    ) -> list[Particle]:
        """Collect up to ``examine_count`` neighbours from the 2x2x2 nearby cells.

        Each cell is walked from a random start, forwards for even particle
        indices and backwards for odd ones. ``particle.neighbor_count`` is set
        to the number found.
        """
        neighbors: list[Particle] = []
        for coord in self._search_cells(particle.position, voxel):
            if not self._inside(coord):
                continue
            cell: Sequence[Particle] = self._cells[self.voxel_id(coord.x, coord.y, coord.z)]
            if not cell:
                continue
            offset = rng.randrange(len(cell))
            candidates = cell[offset::-1] if particle_index % 2 else cell[offset:]
            for candidate in candidates:
                if is_neighbor(particle, candidate, self._h2):
                    neighbors.append(candidate)
                if len(neighbors) >= self._examine_count:
                    break
            if len(neighbors) >= self._examine_count:
                break
        particle.neighbor_count = len(neighbors)
        return neighbors