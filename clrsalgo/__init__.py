"""Classic textbook algorithms and data structures: graphs, heaps, trees, sorting, hashing and dynamic programming."""

__version__ = "0.1.0"