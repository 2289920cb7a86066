"""
Schema-driven type casting.

All split columns arrive as text. The cleaning stage applies one schema
map (COLUMN_TYPES) here, once, turning each listed column into its
semantic type. Missing-value tokens become nulls, except in key columns
where they are rejected. Any other value that does not parse raises
CastError naming the column, row and value.
"""

import pandas as pd
from typing import Callable, Dict, Optional
import logging

from fieldsurvey.config import CLEANING_CONFIG, COLUMN_TYPES, RAW_TABLE_CONFIG
from fieldsurvey.exceptions import CastError

logger = logging.getLogger(__name__)


def missing_mask(series: pd.Series) -> pd.Series:
    """True where a value is null or one of the survey's missing tokens."""
    return series.isna() | series.isin(RAW_TABLE_CONFIG.missing_tokens)


def _raise_first(series: pd.Series, failed: pd.Series, column: str, target: str):
    row = failed[failed].index[0]
    raise CastError(column=column, value=series.loc[row], target_type=target, row=row)


def cast_float(series: pd.Series, column: str) -> pd.Series:
    missing = missing_mask(series)
    values = pd.to_numeric(series.where(~missing), errors="coerce")
    failed = values.isna() & ~missing
    if failed.any():
        _raise_first(series, failed, column, "float")
    return values.astype("float64")


def cast_int(series: pd.Series, column: str) -> pd.Series:
    """Cast to nullable Int64; non-integral numbers such as ``1.5`` fail."""
    missing = missing_mask(series)
    values = pd.to_numeric(series.where(~missing), errors="coerce")
    failed = (values.isna() & ~missing) | (values.notna() & (values % 1 != 0))
    if failed.any():
        _raise_first(series, failed, column, "int")
    return values.astype("Int64")


def cast_key(series: pd.Series, column: str) -> pd.Series:
    """Cast a join or group key to Int64; missing tokens are rejected."""
    missing = missing_mask(series)
    if missing.any():
        _raise_first(series, missing, column, "int (non-null key)")
    return cast_int(series, column)


def cast_date(series: pd.Series, column: str) -> pd.Series:
    fmt = CLEANING_CONFIG.date_format
    missing = missing_mask(series)
    values = pd.to_datetime(series.where(~missing), format=fmt, errors="coerce")
    failed = values.isna() & ~missing
    if failed.any():
        _raise_first(series, failed, column, f"date ({fmt})")
    return values


def cast_category(series: pd.Series, column: str) -> pd.Series:
    return series.where(~missing_mask(series)).astype("category")


CASTERS: Dict[str, Callable[[pd.Series, str], pd.Series]] = {
    "float": cast_float,
    "int": cast_int,
    "key": cast_key,
    "date": cast_date,
    "category": cast_category,
}


def cast_columns(
    df: pd.DataFrame,
    schema: Optional[Dict[str, str]] = None,
) -> pd.DataFrame:
    """
    Cast columns of ``df`` according to ``schema``.

    Args:
        df: Table with text columns
        schema: Mapping column -> target type name; defaults to COLUMN_TYPES

    Returns:
        New DataFrame with the listed columns cast; others untouched

    Raises:
        CastError: On the first value that fails to parse
        ValueError: If the schema names an unknown target type
    """
    schema = COLUMN_TYPES if schema is None else schema
    result = df.copy()

    for column, target in schema.items():
        if target not in CASTERS:
            raise ValueError(f"Unknown target type {target!r} for column {column!r}")
        if column not in result.columns:
            logger.debug(f"Column {column} not present, not cast")
            continue
        result[column] = CASTERS[target](result[column], column)

    return result
