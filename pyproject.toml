[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qwirkle"
version = "1.0.0"
description = "Terminal Qwirkle: a tile-matching board game for 2-4 players or one player against the computer"
requires-python = ">=3.10"
dependencies = []
keywords = ["qwirkle", "board game", "tiles", "terminal", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
qwirkle = "qwirkle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qwirkle"]

[tool.pytest.ini_options]
addopts = "-ra"
