"""Tested solutions to classic array, number, search and linked-list exercises."""

__version__ = "0.1.0"