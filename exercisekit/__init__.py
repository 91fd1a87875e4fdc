"""Classic programming exercises: numbers, conversions, sorting, searching, text,
data structures, trees, graphs, dynamic programming, patterns, scheduling,
SHA-3 and tic-tac-toe."""

__version__ = "0.1.0"