"""Parsing utilities for raw survey tables."""

from .raw_loader import RawTables, load_raw_table, load_raw_tables
from .packed_fields import SplitTables, split_packed_column, split_raw_tables
from .type_casting import cast_columns

__all__ = [
    "RawTables",
    "load_raw_table",
    "load_raw_tables",
    "SplitTables",
    "split_packed_column",
    "split_raw_tables",
    "cast_columns",
]
