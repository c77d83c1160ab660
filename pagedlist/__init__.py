"""Incremental people list loader with dedup and time-gated retry."""

__version__ = "1.0.0"
