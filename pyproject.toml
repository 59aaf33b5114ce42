[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacefighter"
version = "0.1.0"
description = "Game logic of a vertical space shooter: vectors, ships, weapons, projectiles, particles, collisions and levels."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "arcade", "collision", "particles", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spacefighter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
