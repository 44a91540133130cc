"""The simulation loop: neighbour search, hydrodynamics, gravity and integration."""

from __future__ import annotations

import random
import threading
import time
from typing import Callable, Optional, Sequence

from .grid import Grid
from .initial import sphere_particles
from .parameters import Parameters
from .particle import Particle
from .physics import compute_acceleration, compute_density, integrate
from .report import StepTimings

StepCallback = Callable[[StepTimings], None]

_PAUSE_POLL_SECONDS = 0.001


def _elapsed_ms(start_ns: int) -> int:
    return (time.perf_counter_ns() - start_ns) // 1_000_000


class Simulation:
    """A rotating gas sphere around a central mass, advanced step by step.

    The run loop may be driven directly with :meth:`run` or in a background
    thread with :meth:`start` and :meth:`wait`. Pausing and stopping are
    thread-safe.
    """

    def __init__(
        self,
        params: Optional[Parameters] = None,
        seed: int = 42,
        on_step: Optional[StepCallback] = None,
    ) -> None:
        self._params = params if params is not None else Parameters()
        self._rng = random.Random(seed)
        self._particles = sphere_particles(self._params, self._rng)
        self._grid = Grid(self._params)
        self._total_steps = self._params.total_steps
        self._on_step = on_step
        self._lock = threading.Lock()
        self._stopped = False
        self._paused = False
        self._thread: Optional[threading.Thread] = None

    @property
    def params(self) -> Parameters:
        """The live parameters; changes apply from the next step on."""
        return self._params

    @property
    def particles(self) -> Sequence[Particle]:
        return tuple(self._particles)

    @property
    def particle_count(self) -> int:
        return len(self._particles)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def total_steps(self) -> int:
        """Number of steps fixed when the simulation was created."""
        return self._total_steps

    def is_stopped(self) -> bool:
        with self._lock:
            return self._stopped

    def is_paused(self) -> bool:
        with self._lock:
            return self._paused

    def pause_resume(self) -> None:
        """Toggle between paused and running."""
        with self._lock:
            self._paused = not self._paused

    def stop(self) -> None:
        """Ask the run loop to finish."""
        with self._lock:
            self._stopped = True

    def step(self) -> StepTimings:
        """Advance every particle by one time step and report phase timings."""
        params = self._params
        particles = self._particles

        start = time.perf_counter_ns()
        coords = self._grid.voxelize(particles)
        voxelize_ms = _elapsed_ms(start)

        start = time.perf_counter_ns()
        neighbors = [
            self._grid.find_neighbors(particle, index, coord, self._rng)
            for index, (particle, coord) in enumerate(zip(particles, coords))
        ]
        find_ms = _elapsed_ms(start)

        start = time.perf_counter_ns()
        distances = [
            compute_density(particle, near, params)
            for particle, near in zip(particles, neighbors)
        ]
        density_ms = _elapsed_ms(start)

        # Pressure is computed on the fly inside the acceleration phase.
        start = time.perf_counter_ns()
        pressure_ms = _elapsed_ms(start)

        start = time.perf_counter_ns()
        for particle, near, dist in zip(particles, neighbors, distances):
            compute_acceleration(particle, near, dist, params)
        acceleration_ms = _elapsed_ms(start)

        start = time.perf_counter_ns()
        for particle in particles:
            integrate(particle, params)
        integrate_ms = _elapsed_ms(start)

        timings = StepTimings(
            voxelize=voxelize_ms,
            find_neighbors=find_ms,
            compute_density=density_ms,
            compute_pressure=pressure_ms,
            compute_acceleration=acceleration_ms,
            integrate=integrate_ms,
        )
        if self._on_step is not None:
            self._on_step(timings)
        return timings

    def run(self) -> int:
        """Step until stopped or past the last step; return the steps taken."""
        steps = 0
        while not self.is_stopped() and steps <= self._total_steps:
            if self.is_paused():
                time.sleep(_PAUSE_POLL_SECONDS)
                continue
            self.step()
            steps += 1
        return steps

    def start(self) -> None:
        """Run the loop in a background thread."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("simulation is already running")
        self._thread = threading.Thread(target=self.run, name="sph-simulation", daemon=True)
        self._thread.start()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait for the background run to end; return whether it has ended."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def __enter__(self) -> Simulation:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
        self.wait()