"""Sleuth: a single-case detective mini-game engine."""

__version__ = "0.1.0"
