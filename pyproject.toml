[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nemomaze"
version = "1.0.0"
description = "Terminal maze simulation: Nemo searches for the exit while sharks roam the maze"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "game", "simulation", "depth-first search", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nemomaze = "nemomaze.game:main"

[tool.hatch.build.targets.wheel]
packages = ["nemomaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
