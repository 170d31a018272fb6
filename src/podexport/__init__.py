"""Podexport - export cached podcast episodes into a readable folder tree."""

__version__ = "0.1.0"
