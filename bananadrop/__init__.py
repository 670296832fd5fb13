"""Catch falling bananas in a bowl: a curses arcade game and its rules."""

__version__ = "0.1.0"
__all__ = ["__version__"]