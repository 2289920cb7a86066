"""
Stage 5: Aggregation

Builds the per-transect summary:
    - Pass A: mean per-quadrat percent cover of BG and E
    - Pass B: distinct species counts of E and NF
    - Join both with transect management and years_since
"""

import logging

import pandas as pd

from fieldsurvey.assembly.summary_assembly import TransectSummaryAssembler

logger = logging.getLogger(__name__)


def run_aggregate(cleaned: pd.DataFrame) -> pd.DataFrame:
    """
    Run the aggregation stage.

    Returns:
        pd.DataFrame: Transect summary, one row per transect

    Raises:
        InvariantViolationError: If management or years_since vary
            within a transect
    """
    logger.info("=" * 60)
    logger.info("STAGE 5: AGGREGATION")
    logger.info("=" * 60)

    assembler = TransectSummaryAssembler(cleaned)
    summary = assembler.assemble()

    stats = assembler.get_summary()
    logger.info(f"  Transects: {stats['total_transects']}")
    logger.info(f"  BG cover coverage: {stats['bg_cover_coverage']:.1%}")
    logger.info(f"  E cover coverage: {stats['e_cover_coverage']:.1%}")
    logger.info(f"  Management categories: {stats['management_categories']}")

    return summary
