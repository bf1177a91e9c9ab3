"""Classic data structures and algorithms: trees, heaps, stacks, graphs,
dynamic programming, recursion, backtracking and small numerical methods."""

__version__ = "0.1.0"