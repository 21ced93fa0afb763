[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eulersolve"
version = "0.1.0"
description = "Solvers for classic number-theory and combinatorics puzzles as plain, reusable functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["primes", "number theory", "combinatorics", "puzzles", "mathematics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eulersolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
