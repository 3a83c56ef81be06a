"""Sliding-robot puzzle game for the terminal: board generation, moves and game rounds."""

__version__ = "0.1.0"