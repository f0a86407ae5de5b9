[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eggshot"
version = "0.1.0"
description = "A tiny first-person egg game: a scene simulation with walking, jumping and mouse look, and a pygame title screen."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "first-person", "shooter", "pygame", "egg"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
eggshot = "eggshot.app:main"

[tool.hatch.build.targets.wheel]
packages = ["eggshot"]

[tool.pytest.ini_options]
addopts = "-ra"
