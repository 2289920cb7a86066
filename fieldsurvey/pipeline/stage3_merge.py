"""
Stage 3: Data Merging

Assembles the wide analysis table:
    - observations LEFT JOIN species ON species
    - LEFT JOIN management ON transect_number

Both lookup keys must be unique; a duplicated key raises
AmbiguousJoinKeyError instead of multiplying observation rows.
"""

import logging

import pandas as pd

from fieldsurvey.assembly.analysis_table import merge_analysis_table
from fieldsurvey.parsing.packed_fields import SplitTables

logger = logging.getLogger(__name__)


def run_merge(split: SplitTables) -> pd.DataFrame:
    """
    Run the data merging stage.

    Returns:
        pd.DataFrame: Analysis table, one row per observation
    """
    logger.info("=" * 60)
    logger.info("STAGE 3: DATA MERGING")
    logger.info("=" * 60)

    analysis = merge_analysis_table(split)

    return analysis
