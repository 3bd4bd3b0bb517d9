"""Workout logging, history statistics and history-aware workout generation."""

__version__ = "0.1.0"
