[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "antfarm"
version = "0.1.0"
description = "Parse ant farm descriptions, find the best set of paths and print the ants' moves turn by turn"
requires-python = ">=3.10"
dependencies = []
keywords = ["ant farm", "graph", "max flow", "shortest path", "puzzle"]
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
antfarm = "antfarm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["antfarm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
