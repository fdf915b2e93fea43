[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dotstrike"
version = "0.1.0"
description = "A two-player dot-striking board game on a triangle of 21 dots."
requires-python = ">=3.10"
keywords = ["game", "board-game", "pygame", "dots"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dotstrike = "dotstrike.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dotstrike"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
