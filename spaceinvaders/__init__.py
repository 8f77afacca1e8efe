"""A small Space Invaders style arcade game: a steerable spaceship, an alien and a score header."""

__version__ = "0.1.0"