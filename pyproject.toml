[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lootdogs"
version = "0.1.0"
description = "Game model for a multiplayer loot-collecting dog game: maps, roads, movement, loot generation, collisions and state snapshots."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "collision-detection", "loot", "multiplayer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lootdogs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
