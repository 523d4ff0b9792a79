"""Ride-sharing and marketplace models illustrating object-oriented design."""

__version__ = "0.1.0"