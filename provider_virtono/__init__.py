"""Managed resource schemas for the Virtono provider."""

__version__ = "0.1.0"
