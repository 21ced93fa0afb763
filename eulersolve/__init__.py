"""Solvers for classic number-theory and combinatorics puzzles, one plain function per puzzle."""

__version__ = "0.1.0"