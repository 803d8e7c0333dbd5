"""Maple Epoch news front end: WordPress content fetching and normalization."""

__version__ = "0.1.0"
