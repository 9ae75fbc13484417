"""Waypoint: greedy single-mode routing through a random travel graph."""

__version__ = "0.1.0"
