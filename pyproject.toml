[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "binodijkstra"
version = "0.1.0"
description = "Dijkstra's shortest paths over a binomial heap, with experiments on random graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["binomial heap", "dijkstra", "shortest paths", "random graphs", "experiments"]
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

[project.scripts]
binodijkstra = "binodijkstra.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["binodijkstra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
