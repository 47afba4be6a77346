[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marblelevels"
version = "0.1.0"
description = "Generators for the level scripts of a marble flocking game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "levels", "marbles", "flocking", "generator"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
marblelevels = "marblelevels.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["marblelevels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
