[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snowpath"
version = "0.1.0"
description = "Tile-map validation, XPM sprite decoding and scene layout for a small snowy collect-and-escape game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tile-map", "xpm", "sprites", "flood-fill"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snowpath-check = "snowpath.gamemap:main"

[tool.hatch.build.targets.wheel]
packages = ["snowpath"]

[tool.pytest.ini_options]
addopts = "-ra"
