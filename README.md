# sphdisc

A smoothed particle hydrodynamics (SPH) simulation of a rotating gas sphere
around a fixed central point mass. Units are km/s, pc, solar masses and Myr.
It needs nothing beyond the Python standard library.

Each step does the following:

1. The particles are sorted into a voxel grid (`sphdisc.grid.Grid`).
2. Each particle gets a limited number of neighbours, sampled from the
   surrounding voxels.
3. Density is computed with a poly6 kernel.
4. Pressure, viscosity and softened central gravity are combined into an
   acceleration. The result is clamped to a CFL limit.
5. Positions and velocities are advanced with a kick-drift-kick leapfrog
   step (`sphdisc.physics`).

The starting state comes from `sphdisc.initial.sphere_particles`. Particles
are placed uniformly in a sphere at the centre of the box. Each one rotates
about the vertical (y) axis and has a random vertical velocity.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
sphdisc
```

This runs the whole simulation in a background thread and prints a timing
report after every step. The report shows the milliseconds spent in
voxelizing, neighbour search, density, pressure, acceleration and
integration. The default run covers 1 time unit at a step of 0.001.

```
sphdisc r
```

This runs the same simulation without printing anything. Both forms exit
when the run has finished. Ctrl-C stops a run early.

Options:

- `--particles N`: number of particles (default 16384)
- `--time T`: total simulated time (default 1.0)
- `--seed S`: random seed (default 42)

## Using it from Python

```python
from sphdisc.parameters import Parameters
from sphdisc.simulation import Simulation

params = Parameters(particle_count=1024)
sim = Simulation(params, seed=42)
timings = sim.step()
print(sim.particles[0].position, timings.find_neighbors)
```

`Parameters` holds the scales and physical constants. It also derives the
values that follow from them: kernel coefficients, box bounds, the central
position, softening and the number of steps. It raises `ValueError` for
invalid settings.

`Simulation` has these controls:

- `step()` advances every particle once and returns a `StepTimings`.
- `run()` steps until the simulation is stopped or the last step is done.
- `start()` runs the loop in a background thread.
- `pause_resume()`, `stop()` and `wait(timeout)` control that thread.
- An optional `on_step` callback receives the `StepTimings` of each step.

`sphdisc.report.TimingReport` formats those timings as text.

`sphdisc.config.SimulationConfig` exposes the tunable values as named text
entries:

- gravity x
- gravity y
- gravity z
- stiffness
- viscosity
- damping
- timestep
- cfl

Use `read_values_from_simulation()` to fill them from a simulation. Edit one
with `set_value(name, text)`. Apply them with `write_values_to_simulation()`.

## What it does not do

There is no graphical view. The package does not draw the particles or the
voxel grid, and it has no window for editing settings while a simulation
runs. Results are available only through the Python objects above and the
printed timing reports. Particle states are not written to files.