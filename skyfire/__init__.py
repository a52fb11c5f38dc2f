"""Skyfire: a small arcade shooter with a pygame front-end."""

__version__ = "1.0.0"
