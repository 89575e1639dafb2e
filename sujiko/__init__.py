"""
Sujiko Explorer - Solver and layout analysis for Sujiko number puzzles.

See sujiko.solver for the public API.
"""

__version__ = "1.0.0"
