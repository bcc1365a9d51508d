"""Sequential and threaded shortest path algorithms on weighted directed graphs."""

__version__ = "0.1.0"