"""Utilities: comparisons, hashing, strings, lists, hash tables, trees, graphs, typed arrays, dates and prompts."""

__version__ = "0.1.0"