"""A tiny first-person egg game: scene simulation, movement, mouse look and a title menu."""

__version__ = "0.1.0"

__all__ = ["__version__"]