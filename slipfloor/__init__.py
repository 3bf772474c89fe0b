"""A top-down arcade ship duel on a slippery floor, with its vector, collision and timing helpers."""

__version__ = "0.1.0"