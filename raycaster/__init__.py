"""A textured 8x8 grid raycasting engine on pygame, with a rain overlay."""

__version__ = "0.1.0"