"""Command-line entry point for running the simulation."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .parameters import Parameters
from .report import StepTimings, TimingReport
from .simulation import Simulation

_QUIET_MODE = "r"
_WAIT_SLICE_SECONDS = 0.1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sphdisc",
        description="Run a rotating SPH gas sphere around a central mass.",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        default="",
        help="'r' runs without printing step timings",
    )
    parser.add_argument("--particles", type=int, default=None, help="number of particles")
    parser.add_argument("--time", type=float, default=None, help="total simulated time")
    parser.add_argument("--seed", type=int, default=42, help="random seed")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation to completion; print timings unless mode is 'r'."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    overrides = {}
    if args.particles is not None:
        overrides["particle_count"] = args.particles
    if args.time is not None:
        overrides["time_total"] = args.time
    try:
        params = Parameters(**overrides)
    except ValueError as error:
        parser.error(str(error))

    quiet = args.mode == _QUIET_MODE
    report = TimingReport()

    def show(timings: StepTimings) -> None:
        print(report.update_sph(timings), flush=True)

    simulation = Simulation(params, seed=args.seed, on_step=None if quiet else show)
    simulation.start()
    try:
        while not simulation.wait(_WAIT_SLICE_SECONDS):
            pass
    except KeyboardInterrupt:
        simulation.stop()
        simulation.wait()
    return 0