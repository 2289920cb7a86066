"""
Stage 4: Data Cleaning

Operations (in order):
    - Remove the excluded management treatment (Slashing_WC)
    - Drop growth_form and origin
    - Backfill type for ground-cover codes BG, L, LM, R
    - Cast columns via the schema map (float, int, date, category)
"""

import logging

import pandas as pd

from fieldsurvey.assembly.analysis_table import clean_analysis_table

logger = logging.getLogger(__name__)


def run_clean(analysis: pd.DataFrame) -> pd.DataFrame:
    """
    Run the data cleaning stage.

    Returns:
        pd.DataFrame: Cleaned, typed analysis table

    Raises:
        CastError: If any value fails its column's type
    """
    logger.info("=" * 60)
    logger.info("STAGE 4: DATA CLEANING")
    logger.info("=" * 60)

    cleaned = clean_analysis_table(analysis)
    logger.debug(f"Column types: {dict(cleaned.dtypes.astype(str))}")

    return cleaned
