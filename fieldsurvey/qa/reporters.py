"""
QA report generation for the survey pipeline.

Produces qa_report.md with row counts, validation checks and
missingness of the analysis and summary tables.
"""

import pandas as pd
from pathlib import Path
from typing import Optional, Dict, List
from datetime import datetime
import logging

from fieldsurvey.qa.validators import (
    validate_analysis_table,
    validate_summary_table,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def compute_missingness(df: pd.DataFrame) -> Dict[str, float]:
    """Compute missingness rate for each column."""
    return {
        col: df[col].isna().mean()
        for col in df.columns
    }


def _validation_table(title: str, checks: List[ValidationResult]) -> List[str]:
    lines = [f"""
### {title}

| Check | Status | Details |
|-------|--------|---------|"""]
    for v in checks:
        status = "✅ Pass" if v.passed else "❌ Fail"
        lines.append(f"| {v.check_name} | {status} | {v.message} |")
    return lines


def generate_qa_report(
    analysis: pd.DataFrame,
    summary: pd.DataFrame,
    output_path: Optional[Path] = None,
) -> str:
    """
    Generate QA report for one pipeline run.

    Args:
        analysis: Cleaned analysis table
        summary: Transect summary table
        output_path: Where to write the Markdown; not written if None

    Returns:
        Markdown report string
    """
    sections = []

    sections.append(f"""# Data Quality Assurance Report

Generated: {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}

This report summarizes data quality metrics for the Field Survey Pipeline outputs.
""")

    sections.append(f"""
## Analysis Table Summary

- **Observations**: {len(analysis):,}
- **Transects**: {analysis['transect_number'].nunique():,}
- **Species**: {analysis['species'].nunique():,}
""")

    sections.append(f"""
## Transect Summary

- **Transects**: {len(summary):,}
- **Management categories**: {sorted(summary['management'].dropna().astype(str).unique().tolist())}
""")

    sections.append("""
## Validation Checks
""")
    sections.extend(_validation_table("Analysis Validations", validate_analysis_table(analysis)))
    sections.extend(_validation_table("Summary Validations", validate_summary_table(summary)))

    missing = compute_missingness(summary)
    top_missing = sorted(
        [(k, v) for k, v in missing.items() if v > 0],
        key=lambda x: x[1],
        reverse=True,
    )
    if top_missing:
        sections.append("""
## Missingness Summary (Transect Summary)

| Column | Missing Rate |
|--------|--------------|""")
        for col, rate in top_missing:
            sections.append(f"| {col} | {rate:.1%} |")

    report = "\n".join(sections)

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(report)
        logger.info(f"Generated QA report: {output_path}")

    return report
