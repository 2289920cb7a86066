"""
Pipeline Runner

Orchestrates the complete 5-stage survey pipeline.

Stages:
    1. LOAD      - Obtain the three packed raw tables
    2. SPLIT     - Split packed columns into named fields
    3. MERGE     - Join observations to species and management
    4. CLEAN     - Filter, project, backfill and cast
    5. AGGREGATE - Build the per-transect summary

Any stage failure aborts the run; nothing is written for a failed run.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

from fieldsurvey.config import QA_REPORT_FILENAME, SUMMARY_FILENAME
from fieldsurvey.parsing.packed_fields import SplitTables
from fieldsurvey.parsing.raw_loader import RawTables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Outputs of every stage of one run."""
    raw: RawTables
    split: SplitTables
    analysis: pd.DataFrame
    cleaned: pd.DataFrame
    summary: pd.DataFrame
    elapsed_seconds: float


def write_outputs(
    result: PipelineResult,
    output_dir: Path,
    qa: bool = False,
) -> dict:
    """
    Write the summary as parquet and CSV, and optionally a QA report.

    Returns:
        dict: Paths written, keyed by output kind
    """
    from fieldsurvey.utils.io import ensure_dir, save_parquet

    ensure_dir(output_dir)
    paths = {}

    parquet_path = output_dir / SUMMARY_FILENAME
    paths['summary_parquet'] = save_parquet(result.summary, parquet_path)

    csv_path = parquet_path.with_suffix(".csv")
    result.summary.to_csv(csv_path, index=False)
    paths['summary_csv'] = csv_path

    if qa:
        from fieldsurvey.qa import generate_qa_report
        qa_path = output_dir / QA_REPORT_FILENAME
        generate_qa_report(result.cleaned, result.summary, output_path=qa_path)
        paths['qa_report'] = qa_path

    return paths


def run_full_pipeline(
    raw_dir: Optional[Path] = None,
    tables: Optional[RawTables] = None,
    output_dir: Optional[Path] = None,
    qa: bool = False,
) -> PipelineResult:
    """
    Run the complete 5-stage pipeline.

    Args:
        raw_dir: Directory with the raw packed files (defaults to RAW_DIR)
        tables: Raw tables supplied in memory instead of ``raw_dir``
        output_dir: If given, write the summary (and QA report) here
        qa: Run advisory validations and write a QA report

    Returns:
        PipelineResult: Outputs from all stages
    """
    from .stage1_load import run_load
    from .stage2_split import run_split
    from .stage3_merge import run_merge
    from .stage4_clean import run_clean
    from .stage5_aggregate import run_aggregate

    start_time = time.time()

    logger.info("=" * 70)
    logger.info("FIELD SURVEY PIPELINE")
    logger.info("=" * 70)

    raw = run_load(raw_dir=raw_dir, tables=tables)
    split = run_split(raw)
    analysis = run_merge(split)
    cleaned = run_clean(analysis)
    summary = run_aggregate(cleaned)

    elapsed = time.time() - start_time
    result = PipelineResult(
        raw=raw,
        split=split,
        analysis=analysis,
        cleaned=cleaned,
        summary=summary,
        elapsed_seconds=elapsed,
    )

    if qa:
        from fieldsurvey.qa.validators import (
            log_validation_results,
            validate_analysis_table,
            validate_summary_table,
        )
        failures = log_validation_results(validate_analysis_table(cleaned), "analysis")
        failures += log_validation_results(validate_summary_table(summary), "summary")
        logger.info(f"QA checks: {failures} failed")

    if output_dir is not None:
        write_outputs(result, Path(output_dir), qa=qa)

    logger.info("=" * 70)
    logger.info("PIPELINE COMPLETE")
    logger.info("=" * 70)
    logger.info(f"Total time: {elapsed:.2f} seconds")

    return result


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    run_full_pipeline()
