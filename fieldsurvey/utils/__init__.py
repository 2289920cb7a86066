"""Shared utilities for the Field Survey pipeline."""

from .io import ensure_dir, read_packed_text, save_parquet
from .frames import left_join, distinct_rows, pivot_wider, duplicated_keys

__all__ = [
    "ensure_dir",
    "read_packed_text",
    "save_parquet",
    "left_join",
    "distinct_rows",
    "pivot_wider",
    "duplicated_keys",
]
