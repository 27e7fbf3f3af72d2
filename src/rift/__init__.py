"""Recursively Include Text Files."""

__version__ = "1.0.0"
