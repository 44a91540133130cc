"""SPH simulation of a rotating gas sphere around a central mass."""

__version__ = "0.1.0"