"""Text report of how long each part of a step took."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StepTimings:
    """Milliseconds spent in each phase of one simulation step."""

    voxelize: int = 0
    find_neighbors: int = 0
    compute_density: int = 0
    compute_pressure: int = 0
    compute_acceleration: int = 0
    integrate: int = 0


@dataclass
class TimingReport:
    """Latest simulation and drawing timings, rendered as text."""

    timings: StepTimings = field(default_factory=StepTimings)
    visualization: int = 0

    def update_sph(self, timings: StepTimings) -> str:
        """Record new step timings and return the refreshed text."""
        self.timings = timings
        return self.text()

    def update_visualization(self, elapsed: int) -> str:
        """Record the latest drawing time and return the refreshed text."""
        self.visualization = elapsed
        return self.text()

    def text(self) -> str:
        """Return the report as tab-aligned lines."""
        t = self.timings
        return (
            f"voxelize:\t\t{t.voxelize}\n"
            f"find neighbors:\t\t{t.find_neighbors}\n"
            f"compute density:\t{t.compute_density}\n"
            f"compute pressure:\t{t.compute_pressure}\n"
            f"compure acceleration:\t{t.compute_acceleration}\n"
            f"integrate:\t\t{t.integrate}\n"
            f"draw:\t\t{self.visualization}\n"
        )