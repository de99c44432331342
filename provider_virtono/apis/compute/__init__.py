"""Compute API group."""
