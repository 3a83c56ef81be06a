[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ricochet"
version = "0.1.0"
description = "A terminal puzzle game where players bid on the fewest sliding moves to bring a robot to its target"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "robots", "terminal", "board-game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: POSIX",
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
ricochet = "ricochet.game:main"

[tool.hatch.build.targets.wheel]
packages = ["ricochet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
