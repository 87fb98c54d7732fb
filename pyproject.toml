[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studylab"
version = "0.1.0"
description = "Classic data structures, number exercises, small console games and a terminal Tetris for learning and practice"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data-structures",
    "linked-list",
    "binary-search-tree",
    "heap",
    "sorting",
    "tetris",
    "games",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studylab-students = "studylab.application:main"
studylab-games = "studylab.games:main"
studylab-tetris = "studylab.tetris.game:main"

[tool.hatch.build.targets.wheel]
packages = ["studylab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
