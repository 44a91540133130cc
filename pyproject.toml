[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "sphdisc"
version = "0.1.0"
description = "Smoothed particle hydrodynamics simulation of a rotating gas sphere around a central mass"
requires-python = ">=3.10"
dependencies = []
keywords = ["sph", "hydrodynamics", "simulation", "astrophysics", "particles", "leapfrog"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sphdisc = "sphdisc.cli:main"

[tool.setuptools.packages.find]
include = ["sphdisc*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
