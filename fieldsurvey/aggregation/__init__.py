"""Aggregation utilities for transect-level metrics."""

from .percent_cover import compute_percent_cover
from .diversity import compute_diversity

__all__ = ["compute_percent_cover", "compute_diversity"]
