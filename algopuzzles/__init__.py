"""Classic programming puzzles and small algorithms as plain functions and classes."""

__version__ = "0.1.0"