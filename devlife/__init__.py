"""A terminal board game about getting through a computer science degree."""

__version__ = "0.1.0"