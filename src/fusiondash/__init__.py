"""Fusion dashboard view-composition layer."""

__version__ = "0.1.0"
