"""Building blocks for a 2D arcade space shooter: vectors, input enums, masks, collisions, particles, explosions and resources."""

__version__ = "0.1.0"