[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pawnder"
version = "1.0.0"
description = "Building blocks of a chess engine: a padded board, position hashing, killer moves, an opening book reader, time control and console messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "engine", "opening book", "transposition table", "killer moves", "winboard", "xboard"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pawnder"]

[tool.hatch.build.targets.sdist]
include = ["pawnder", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
