[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starterbox"
version = "0.1.0"
description = "Classic beginner programs: sorting, searching, number puzzles, text patterns and small console games"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "algorithms", "patterns", "games", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
starterbox-linkedlist = "starterbox.linkedlist:main"
starterbox-polynomial = "starterbox.polynomial:main"
starterbox-guess = "starterbox.guessgame:main"
starterbox-tictactoe = "starterbox.tictactoe:main"
starterbox-hangman = "starterbox.hangman:main"

[tool.hatch.build.targets.wheel]
packages = ["starterbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
