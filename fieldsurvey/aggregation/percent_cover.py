"""
Percent-cover aggregation for transect-level cover statistics.

Computes, per transect:
- BG_pc: mean bare-ground cover per quadrat
- E_pc: mean exotic cover per quadrat

Cover is first summed within each quadrat and type, then averaged
across the quadrats where that type was recorded. A quadrat with no
observation of a type does not count as zero cover for it. A missing
cover value makes its quadrat total, and so the transect mean, null.
"""

import pandas as pd
from typing import Optional
import logging

from fieldsurvey.config import AGGREGATION_CONFIG, AggregationConfig
from fieldsurvey.utils.frames import left_join, pivot_wider

logger = logging.getLogger(__name__)


def _sum_keep_null(values: pd.Series) -> float:
    return values.sum(skipna=False)


def _mean_keep_null(values: pd.Series) -> float:
    return values.mean(skipna=False)


def sum_cover_by_quadrat(cleaned: pd.DataFrame) -> pd.DataFrame:
    """Total percent cover per (transect_number, quadrat, type)."""
    return (
        cleaned.groupby(["transect_number", "quadrat", "type"])["percent_cover"]
        .agg(_sum_keep_null)
        .reset_index(name="quadrat_pc")
    )


def mean_cover_by_transect(per_quadrat: pd.DataFrame) -> pd.DataFrame:
    """Mean of per-quadrat totals per (transect_number, type)."""
    return (
        per_quadrat.groupby(["transect_number", "type"])["quadrat_pc"]
        .agg(_mean_keep_null)
        .reset_index(name="mean_pc")
    )


def compute_percent_cover(
    cleaned: pd.DataFrame,
    config: Optional[AggregationConfig] = None,
) -> pd.DataFrame:
    """
    Aggregate the cleaned analysis table to mean cover per transect.

    Args:
        cleaned: Cleaned analysis table with transect_number, quadrat,
            type and percent_cover columns
        config: Aggregation config (defaults to AGGREGATION_CONFIG)

    Returns:
        DataFrame with one row per transect in ``cleaned`` and one column
        per configured cover type (BG_pc, E_pc)
    """
    config = config or AGGREGATION_CONFIG

    per_quadrat = sum_cover_by_quadrat(cleaned)
    per_transect = mean_cover_by_transect(per_quadrat)

    wide = pivot_wider(
        per_transect,
        index="transect_number",
        names_from="type",
        values_from="mean_pc",
        keep=list(config.cover_columns),
        rename=config.cover_columns,
    )

    # Keep transects that recorded none of the selected types
    transects = (
        cleaned[["transect_number"]]
        .drop_duplicates()
        .sort_values("transect_number")
        .reset_index(drop=True)
    )
    cover = left_join(transects, wide, "transect_number", right_name="percent_cover")

    for col in config.cover_columns.values():
        cover[col] = cover[col].astype("float64")

    logger.info(f"Computed percent cover for {len(cover)} transects")
    for col in config.cover_columns.values():
        logger.debug(f"  Mean {col}: {cover[col].mean():.2f}")

    return cover
