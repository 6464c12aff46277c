[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blackship"
version = "1.0.0"
description = "A terminal naval battle game for one player or two players over TCP"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "naval battle", "terminal game", "multiplayer", "board game"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blackship = "blackship.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blackship"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
