"""
Table verbs shared by the pipeline stages.

Each verb takes a DataFrame and returns a new one; inputs are never
modified in place.
"""

from typing import Dict, List, Optional, Sequence
import logging
import pandas as pd

from fieldsurvey.exceptions import AmbiguousJoinKeyError

logger = logging.getLogger(__name__)


def duplicated_keys(df: pd.DataFrame, key: str) -> list:
    """Return the distinct key values that occur more than once."""
    values = df[key]
    dupes = values[values.duplicated(keep=False).to_numpy()]
    return dupes.drop_duplicates().tolist()


def left_join(
    left: pd.DataFrame,
    right: pd.DataFrame,
    key: str,
    right_name: str = "right",
) -> pd.DataFrame:
    """
    Left-join ``right`` onto ``left`` by a single key column.

    Every left row is kept in its original order and gains the non-key
    columns of its matching right row, or nulls when there is no match.

    Args:
        left: Table whose rows are preserved
        right: Lookup table; ``key`` must be unique in it
        key: Column present in both tables
        right_name: Name of the right table used in error messages

    Returns:
        New DataFrame with ``len(left)`` rows

    Raises:
        AmbiguousJoinKeyError: If ``key`` is duplicated in ``right``
        ValueError: If a non-key column exists on both sides
    """
    dupes = duplicated_keys(right, key)
    if dupes:
        raise AmbiguousJoinKeyError(table=right_name, key=key, duplicates=dupes)

    clash = [c for c in right.columns if c != key and c in left.columns]
    if clash:
        raise ValueError(
            f"Columns {clash} exist in both tables; cannot join {right_name} on {key!r}"
        )

    merged = left.merge(right, on=key, how="left", sort=False)

    unmatched = (~left[key].isin(right[key])).sum()
    logger.debug(
        f"Joined {right_name} on {key}: {len(merged):,} rows, {unmatched:,} unmatched"
    )
    return merged


def distinct_rows(df: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """Project onto ``columns`` and keep the first of each distinct row."""
    return df[list(columns)].drop_duplicates().reset_index(drop=True)


def pivot_wider(
    df: pd.DataFrame,
    index: str,
    names_from: str,
    values_from: str,
    keep: Optional[List[str]] = None,
    rename: Optional[Dict[str, str]] = None,
) -> pd.DataFrame:
    """
    Spread a long table into one column per distinct ``names_from`` value.

    Args:
        df: Long table with at most one row per (index, names_from) pair
        index: Column identifying output rows
        names_from: Column whose values become column names
        values_from: Column supplying the cell values
        keep: Output columns to retain, in order; missing ones are added as nulls
        rename: Mapping applied to the spread column names

    Returns:
        Wide DataFrame with ``index`` as its first column
    """
    if df.empty:
        wide = pd.DataFrame(index=pd.Index(df[index], name=index))
    else:
        wide = df.pivot(index=index, columns=names_from, values=values_from)
        wide.columns.name = None

    if keep is not None:
        wide = wide.reindex(columns=keep)

    if rename:
        wide = wide.rename(columns=rename)

    return wide.reset_index()
