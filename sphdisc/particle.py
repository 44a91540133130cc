"""A single smoothed particle."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec3 import Vec3


@dataclass(eq=False)
class Particle:
    """State of one smoothed particle; equality is identity."""

    position: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    acceleration: Vec3 = field(default_factory=Vec3)
    mass: float = 1.0
    density: float = 0.0
    neighbor_count: int = 0