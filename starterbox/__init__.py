"""Classic beginner programs: algorithms, number puzzles, text patterns and console games."""

__version__ = "0.1.0"