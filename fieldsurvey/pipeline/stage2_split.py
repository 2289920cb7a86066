"""
Stage 2: Split

Splits the packed column of each raw table into its named text fields.
Any row with the wrong number of fields aborts the run.
"""

import logging

from fieldsurvey.parsing.packed_fields import SplitTables, split_raw_tables
from fieldsurvey.parsing.raw_loader import RawTables

logger = logging.getLogger(__name__)


def run_split(raw: RawTables) -> SplitTables:
    """
    Run the split stage.

    Returns:
        SplitTables: observations, management and species as text tables
    """
    logger.info("=" * 60)
    logger.info("STAGE 2: SPLIT PACKED FIELDS")
    logger.info("=" * 60)

    split = split_raw_tables(raw)

    for name, count in split.row_counts().items():
        logger.info(f"  {name}: {count:,} rows")

    return split
