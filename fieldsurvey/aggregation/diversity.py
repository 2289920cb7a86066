"""
Diversity aggregation: distinct species of a type per transect.

Diversity here is the number of distinct species names, not the number
of observations, so a species recorded in several quadrats counts once.
"""

import pandas as pd
from typing import Optional
import logging

from fieldsurvey.config import AGGREGATION_CONFIG, AggregationConfig
from fieldsurvey.utils.frames import pivot_wider

logger = logging.getLogger(__name__)


def count_distinct_species(cleaned: pd.DataFrame, types) -> pd.DataFrame:
    """Distinct species per (transect_number, type) for the given types."""
    subset = cleaned[cleaned["type"].isin(list(types))]
    return (
        subset.groupby(["transect_number", "type"])["species"]
        .nunique()
        .reset_index(name="diversity")
    )


def compute_diversity(
    cleaned: pd.DataFrame,
    config: Optional[AggregationConfig] = None,
) -> pd.DataFrame:
    """
    Aggregate the cleaned analysis table to per-transect diversity counts.

    Returns:
        DataFrame with transect_number, E_diversity and NF_diversity
        (nullable Int64; <NA> where a transect has no species of that type).
        Only transects with at least one E or NF row appear.
    """
    config = config or AGGREGATION_CONFIG

    counts = count_distinct_species(cleaned, config.diversity_columns)

    wide = pivot_wider(
        counts,
        index="transect_number",
        names_from="type",
        values_from="diversity",
        keep=list(config.diversity_columns),
        rename=config.diversity_columns,
    )

    for col in config.diversity_columns.values():
        wide[col] = wide[col].astype("Int64")

    logger.info(f"Computed diversity for {len(wide)} transects")
    return wide
