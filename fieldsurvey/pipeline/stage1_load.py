"""
Stage 1: Data Load

Obtains the three raw survey tables, each a single packed text column.

Data Sources:
    - observations (transect_number,quadrat,species,percent_cover)
    - management (site management record per transect)
    - species (species lookup: origin, growth form, type)
"""

import logging
from pathlib import Path
from typing import Optional

from fieldsurvey.parsing.raw_loader import RawTables, load_raw_tables

logger = logging.getLogger(__name__)


def run_load(
    raw_dir: Optional[Path] = None,
    tables: Optional[RawTables] = None,
) -> RawTables:
    """
    Run the data load stage.

    Args:
        raw_dir: Directory holding the raw files (defaults to RAW_DIR)
        tables: Raw tables already in memory; when given, nothing is read

    Returns:
        RawTables: The three packed tables
    """
    logger.info("=" * 60)
    logger.info("STAGE 1: DATA LOAD")
    logger.info("=" * 60)

    if tables is None:
        tables = load_raw_tables(raw_dir)
    else:
        logger.info("Using raw tables supplied in memory")

    for name, count in tables.row_counts().items():
        logger.info(f"  {name}: {count:,} packed rows")

    return tables
