"""Game logic for a vertical space shooter: vectors, input, particles, resources, ships, weapons, collisions and levels."""

__version__ = "0.1.0"