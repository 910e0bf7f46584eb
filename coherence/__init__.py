"""Coherence breathing coach."""

__version__ = "0.1.0"
