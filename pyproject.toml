[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "odesteps"
version = "2.0.0"
description = "Step-by-step numerical solvers for first-order ordinary differential equations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ode",
    "differential equations",
    "euler",
    "heun",
    "runge-kutta",
    "adams-bashforth",
    "numerical methods",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
odesteps = "odesteps.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["odesteps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
