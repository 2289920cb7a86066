#!/usr/bin/env python3
"""
Field Survey Pipeline - Main Runner

Usage:
    python run_pipeline.py --help
    python run_pipeline.py                          # Raw tables from data/raw
    python run_pipeline.py --raw-dir path/to/raw    # Raw tables from elsewhere
    python run_pipeline.py --output-dir out --qa    # Also write QA report
"""

import argparse
import logging
import sys
from pathlib import Path

from fieldsurvey.config import RAW_DIR, FINAL_DIR
from fieldsurvey.exceptions import SurveyPipelineError
from fieldsurvey.pipeline import run_full_pipeline

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Field Survey Pipeline - transect cover and diversity summary"
    )

    parser.add_argument(
        "--raw-dir",
        type=Path,
        default=RAW_DIR,
        help=f"Directory with the raw packed tables (default: {RAW_DIR})"
    )

    parser.add_argument(
        "--output-dir",
        type=Path,
        default=FINAL_DIR,
        help=f"Directory for the summary outputs (default: {FINAL_DIR})"
    )

    parser.add_argument(
        "--qa",
        action="store_true",
        help="Run validation checks and write a QA report"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-step detail"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        result = run_full_pipeline(
            raw_dir=args.raw_dir,
            output_dir=args.output_dir,
            qa=args.qa,
        )
    except (SurveyPipelineError, FileNotFoundError) as e:
        logger.error(f"Pipeline aborted: {e}")
        return 1

    logger.info(f"Output files in: {args.output_dir}")
    logger.info(f"Transects summarised: {len(result.summary)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
