"""Scaffolding for clean-architecture Flutter features."""

__version__ = "0.1.0"
