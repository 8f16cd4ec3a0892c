"""Solvers for classic programming puzzles: strings, grids, matching and dynamic programming."""

__version__ = "0.1.0"