[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depotsim"
version = "0.1.0"
description = "Discrete-event simulation of package routing through a network of depots"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete-event", "logistics", "graph", "scheduler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
depotsim = "depotsim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["depotsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
