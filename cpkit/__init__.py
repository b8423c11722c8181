"""Algorithms, data structures and debug printing for competitive programming."""

__version__ = "0.1.0"