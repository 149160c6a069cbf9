"""Nether portal linkage planning: portal geometry and reachability resolution."""

__version__ = "0.1.0"
