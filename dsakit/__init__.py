"""Sorting, binary search, a binary search tree, bounded queue and stack, a linked list and graphs, each with a console program."""

__version__ = "0.1.0"