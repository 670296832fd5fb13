[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bananadrop"
version = "0.1.0"
description = "A terminal arcade game: catch falling bananas and power-ups in a bowl."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "terminal", "curses", "bananas"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bananadrop = "bananadrop.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bananadrop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
