[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ruztoo"
version = "0.1.0"
description = "Game rules, map model, entity systems and console drawing for a tile-based dungeon roguelike"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "dungeon", "game", "entity-component-system", "tiles", "cp437"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ruztoo"]

[tool.hatch.build.targets.sdist]
include = ["ruztoo", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
