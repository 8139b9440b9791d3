"""Simulations of page replacement, disk scheduling, synchronisation problems and process demos."""

__version__ = "0.1.0"