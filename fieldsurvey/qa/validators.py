"""
Data validation functions for analysis and summary tables.

Implements plausibility and consistency checks. These checks are
advisory: they report problems but never abort a pipeline run.
"""

import pandas as pd
from typing import Optional, Dict, List, Any
from dataclasses import dataclass
import logging

from fieldsurvey.config import VALIDATION_CONFIG

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check."""
    check_name: str
    passed: bool
    message: str
    affected_count: int = 0
    affected_fraction: float = 0.0
    details: Optional[Dict[str, Any]] = None


def _fraction(count: int, total: int) -> float:
    return count / total if total > 0 else 0.0


def validate_analysis_table(df: pd.DataFrame) -> List[ValidationResult]:
    """
    Validate the cleaned analysis table.

    Checks:
    - percent_cover within bounds
    - quadrats per transect at most the survey design count
    - observations without a species lookup entry (null type)
    - observations without a management record (null management)

    Returns:
        List of ValidationResult objects
    """
    results = []

    if "percent_cover" in df.columns:
        pc = df["percent_cover"]
        out_of_bounds = int((
            (pc < VALIDATION_CONFIG.min_percent_cover)
            | (pc > VALIDATION_CONFIG.max_percent_cover)
        ).sum())
        results.append(ValidationResult(
            check_name="percent_cover_bounds",
            passed=(out_of_bounds == 0),
            message=(
                f"{out_of_bounds} values outside "
                f"[{VALIDATION_CONFIG.min_percent_cover:g}, {VALIDATION_CONFIG.max_percent_cover:g}]"
            ),
            affected_count=out_of_bounds,
            affected_fraction=_fraction(out_of_bounds, int(pc.notna().sum())),
        ))

    if "transect_number" in df.columns and "quadrat" in df.columns:
        quadrats = df.groupby("transect_number")["quadrat"].nunique()
        over = quadrats[quadrats > VALIDATION_CONFIG.quadrats_per_transect]
        results.append(ValidationResult(
            check_name="quadrats_per_transect",
            passed=(len(over) == 0),
            message=(
                f"{len(over)} transects with more than "
                f"{VALIDATION_CONFIG.quadrats_per_transect} quadrats"
            ),
            affected_count=len(over),
            affected_fraction=_fraction(len(over), len(quadrats)),
            details={"transects": over.index.tolist()},
        ))

    if "type" in df.columns:
        unmatched = int(df["type"].isna().sum())
        results.append(ValidationResult(
            check_name="species_lookup_coverage",
            passed=(unmatched == 0),
            message=f"{unmatched} observations with no type",
            affected_count=unmatched,
            affected_fraction=_fraction(unmatched, len(df)),
            details={"species": sorted(df.loc[df["type"].isna(), "species"].unique().tolist())},
        ))

    if "management" in df.columns:
        unmatched = int(df["management"].isna().sum())
        results.append(ValidationResult(
            check_name="management_coverage",
            passed=(unmatched == 0),
            message=f"{unmatched} observations with no management record",
            affected_count=unmatched,
            affected_fraction=_fraction(unmatched, len(df)),
        ))

    return results


def validate_summary_table(df: pd.DataFrame) -> List[ValidationResult]:
    """
    Validate the transect summary table.

    Checks:
    - transect_number uniqueness
    - mean cover columns within percent bounds
    - diversity counts non-negative

    Returns:
        List of ValidationResult objects
    """
    results = []

    if "transect_number" in df.columns:
        duplicates = int(df["transect_number"].duplicated().sum())
        results.append(ValidationResult(
            check_name="transect_uniqueness",
            passed=(duplicates == 0),
            message=f"{duplicates} duplicate transect_numbers found",
            affected_count=duplicates,
            affected_fraction=_fraction(duplicates, len(df)),
        ))

    for col in ["BG_pc", "E_pc"]:
        if col in df.columns:
            v = df[col]
            out_of_bounds = int((
                (v < VALIDATION_CONFIG.min_percent_cover)
                | (v > VALIDATION_CONFIG.max_percent_cover)
            ).sum())
            results.append(ValidationResult(
                check_name=f"{col.lower()}_bounds",
                passed=(out_of_bounds == 0),
                message=f"{out_of_bounds} {col} values outside percent bounds",
                affected_count=out_of_bounds,
                affected_fraction=_fraction(out_of_bounds, int(v.notna().sum())),
            ))

    for col in ["E_diversity", "NF_diversity"]:
        if col in df.columns:
            v = df[col]
            negative = int((v < 0).sum())
            results.append(ValidationResult(
                check_name=f"{col.lower()}_non_negative",
                passed=(negative == 0),
                message=f"{negative} negative {col} values",
                affected_count=negative,
                affected_fraction=_fraction(negative, int(v.notna().sum())),
            ))

    return results


def log_validation_results(results: List[ValidationResult], table: str) -> int:
    """Log each check; failures at WARNING. Returns the number of failures."""
    failures = 0
    for r in results:
        if r.passed:
            logger.debug(f"  [{table}] {r.check_name}: ok")
        else:
            failures += 1
            logger.warning(f"  [{table}] {r.check_name}: {r.message}")
    return failures
