"""Sorting, heaps, search trees, graphs, hash tables and dynamic-programming exercises."""

__version__ = "0.1.0"