"""Capture tasks into Godspeed from a one-line shorthand."""

__version__ = "0.1.0"
