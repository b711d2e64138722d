[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tennis-season"
version = "0.1.0"
description = "Tennis season building blocks: players, tournament tiers and draws, set and match simulation, CSV rosters"
requires-python = ">=3.10"
dependencies = []
keywords = ["tennis", "simulation", "atp", "wta", "tournament", "ranking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tennis_season"]

[tool.pytest.ini_options]
addopts = "-ra"
