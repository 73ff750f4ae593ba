[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pawnstorm"
version = "0.1.0"
description = "A small terminal chess game with an alpha-beta search opponent"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "game", "alpha-beta", "minimax", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
pawnstorm = "pawnstorm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pawnstorm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
