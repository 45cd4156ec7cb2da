[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bgiquest"
version = "0.1.0"
description = "A small point-and-click adventure with a node map, scenes and an inventory"
requires-python = ">=3.10"
keywords = ["adventure", "game", "point-and-click", "pygame", "inventory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bgiquest = "bgiquest.render:main"

[tool.hatch.build.targets.wheel]
packages = ["bgiquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
