"""
Analysis table assembly and cleaning.

Merges:
- observations LEFT JOIN species ON species
- LEFT JOIN management ON transect_number

Then cleans, in this order:
1. drop the excluded management treatment
2. drop unneeded lookup columns
3. backfill type for abiotic ground-cover codes
4. cast every column through the schema map
"""

import pandas as pd
from typing import Iterable, Optional
import logging

from fieldsurvey.config import CLEANING_CONFIG, COLUMN_TYPES
from fieldsurvey.parsing.packed_fields import SplitTables
from fieldsurvey.parsing.type_casting import cast_columns
from fieldsurvey.utils.frames import left_join

logger = logging.getLogger(__name__)


def merge_analysis_table(split: SplitTables) -> pd.DataFrame:
    """
    Join observations to the species and management lookups.

    The result has one row per observation, in observation order.
    """
    analysis = left_join(split.observations, split.species, "species", right_name="species")
    analysis = left_join(analysis, split.management, "transect_number", right_name="management")

    n_no_species = analysis["type"].isna().sum()
    n_no_site = analysis["management"].isna().sum()
    logger.info(f"Merged analysis table: {len(analysis):,} rows, {len(analysis.columns)} columns")
    if n_no_species:
        logger.info(f"  {n_no_species:,} observations without a species lookup entry")
    if n_no_site:
        logger.info(f"  {n_no_site:,} observations without a management record")

    return analysis


def filter_excluded_management(
    df: pd.DataFrame,
    excluded: Optional[str] = None,
) -> pd.DataFrame:
    """Remove rows of the excluded treatment; null management rows are kept."""
    excluded = excluded or CLEANING_CONFIG.excluded_management
    keep = df["management"].isna() | (df["management"] != excluded)
    logger.debug(f"Removed {(~keep).sum():,} rows with management == {excluded!r}")
    return df[keep].copy()


def drop_columns(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    return df.drop(columns=list(columns))


def backfill_type(df: pd.DataFrame, codes: Optional[Iterable[str]] = None) -> pd.DataFrame:
    """
    Force ``type`` to equal ``species`` for abiotic ground-cover codes.

    These codes (bare ground, litter, lichen/moss, rock) are not in the
    species lookup, so the join leaves their type null.
    """
    codes = list(codes) if codes is not None else CLEANING_CONFIG.backfill_codes
    result = df.copy()
    is_code = result["species"].isin(codes)
    result["type"] = result["type"].where(~is_code, result["species"])
    logger.debug(f"Backfilled type for {is_code.sum():,} ground-cover rows")
    return result


def clean_analysis_table(analysis: pd.DataFrame) -> pd.DataFrame:
    """
    Apply the four cleaning steps to the merged analysis table.

    Raises:
        CastError: If any value fails its column's type
    """
    cleaned = filter_excluded_management(analysis)
    cleaned = drop_columns(cleaned, CLEANING_CONFIG.dropped_columns)
    cleaned = backfill_type(cleaned)
    cleaned = cast_columns(cleaned, COLUMN_TYPES)
    cleaned = cleaned.reset_index(drop=True)

    logger.info(
        f"Cleaned analysis table: {len(cleaned):,} of {len(analysis):,} rows kept"
    )
    return cleaned
