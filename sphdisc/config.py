"""Editable text view of the tunable simulation settings."""

from __future__ import annotations

from .simulation import Simulation
from .vec3 import Vec3

_NAMES = (
    "gravity x",
    "gravity y",
    "gravity z",
    "stiffness",
    "viscosity",
    "damping",
    "timestep",
    "cfl",
)


def _format(value: float) -> str:
    return f"{value:.6f}"


def _parse(text: str) -> float:
    # Unparseable text counts as zero, as a lenient form field would.
    try:
        return float(text)
    except ValueError:
        return 0.0


class SimulationConfig:
    """Named text values mirroring a simulation's tunable parameters."""

    def __init__(self, simulation: Simulation) -> None:
        self._simulation = simulation
        self._values: dict[str, str] = {name: "" for name in _NAMES}

    def read_values_from_simulation(self) -> None:
        """Refresh every value from the simulation."""
        params = self._simulation.params
        gravity = params.gravity
        for name, value in zip(
            _NAMES,
            (
                gravity.x,
                gravity.y,
                gravity.z,
                params.stiffness,
                params.viscosity,
                params.damping,
                params.time_step,
                params.cfl_limit,
            ),
        ):
            self._values[name] = _format(value)

    def write_values_to_simulation(self) -> None:
        """Parse every value and apply it to the simulation."""
        numbers = {name: _parse(text) for name, text in self._values.items()}
        params = self._simulation.params
        params.gravity = Vec3(numbers["gravity x"], numbers["gravity y"], numbers["gravity z"])
        params.stiffness = numbers["stiffness"]
        params.viscosity = numbers["viscosity"]
        params.damping = numbers["damping"]
        params.time_step = numbers["timestep"]
        params.cfl_limit = numbers["cfl"]

    def set_value(self, name: str, text: str) -> None:
        """Edit one value; raise KeyError for an unknown name."""
        if name not in self._values:
            raise KeyError(name)
        self._values[name] = text

    def value(self, name: str) -> str:
        """Return the text of one value; raise KeyError for an unknown name."""
        return self._values[name]

    def items(self) -> list[tuple[str, str]]:
        """Return (name, text) pairs in display order."""
        return list(self._values.items())