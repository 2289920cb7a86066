"""
Global configuration for the Field Survey Pipeline.

Implements project conventions for:
- File paths for raw and final tables
- Packed field layouts of the three raw tables
- Cleaning literals and the per-column type schema
- Aggregation and validation constants
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, List, Set

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
RAW_DIR = DATA_DIR / "raw"
FINAL_DIR = DATA_DIR / "final"

SUMMARY_FILENAME = "transect_summary.parquet"
QA_REPORT_FILENAME = "qa_report.md"

# =============================================================================
# RAW TABLE LAYOUT
# =============================================================================

@dataclass
class RawTableConfig:
    """Layout of the three packed raw tables."""

    # Raw files: one packed value per line, header on the first line
    observations_file: str = "observations.txt"
    management_file: str = "management.txt"
    species_file: str = "species.txt"

    # Separator used when reading a raw file; never occurs inside a value
    file_separator: str = "\t"

    # Delimiter between fields inside a packed value
    delimiter: str = ","

    observation_fields: List[str] = field(default_factory=lambda: [
        "transect_number", "quadrat", "species", "percent_cover",
    ])

    management_fields: List[str] = field(default_factory=lambda: [
        "transect_number", "size", "date", "orientation", "assistant",
        "management", "burn_season", "years_since",
        "biomass_reduction_year", "management_unit",
    ])

    species_fields: List[str] = field(default_factory=lambda: [
        "species", "origin", "growth_form", "type",
    ])

    # Tokens the survey sheets use for a missing value
    missing_tokens: Set[str] = field(default_factory=lambda: {"NA", ""})


RAW_TABLE_CONFIG = RawTableConfig()

# =============================================================================
# CLEANING CONFIGURATION
# =============================================================================

@dataclass
class CleaningConfig:
    """Literals used by the cleaning stage."""

    # Treatment category removed from the analysis
    excluded_management: str = "Slashing_WC"

    dropped_columns: List[str] = field(default_factory=lambda: [
        "growth_form", "origin",
    ])

    # Abiotic ground-cover codes missing from the species lookup;
    # for these the type is the code itself
    backfill_codes: List[str] = field(default_factory=lambda: [
        "BG", "L", "LM", "R",
    ])

    date_format: str = "%Y-%m-%d"


CLEANING_CONFIG = CleaningConfig()

# Target type of every column cast by the cleaning stage.
# Columns not listed stay text. "key" columns are integers that may not
# be missing.
COLUMN_TYPES: Dict[str, str] = {
    "percent_cover": "float",
    "size": "float",
    "date": "date",
    "management": "category",
    "years_since": "float",
    "transect_number": "key",
    "quadrat": "key",
}

# =============================================================================
# AGGREGATION CONFIGURATION
# =============================================================================

@dataclass
class AggregationConfig:
    """Type selections and output names of the summary table."""

    # Pass A: mean percent cover per transect
    cover_columns: Dict[str, str] = field(default_factory=lambda: {
        "BG": "BG_pc",
        "E": "E_pc",
    })

    # Pass B: distinct species per transect
    diversity_columns: Dict[str, str] = field(default_factory=lambda: {
        "E": "E_diversity",
        "NF": "NF_diversity",
    })

    # Transect-level explanatory variables
    transect_attributes: List[str] = field(default_factory=lambda: [
        "management", "years_since",
    ])

    summary_columns: List[str] = field(default_factory=lambda: [
        "transect_number", "BG_pc", "E_pc", "E_diversity", "NF_diversity",
        "management", "years_since",
    ])


AGGREGATION_CONFIG = AggregationConfig()

# =============================================================================
# VALIDATION CONFIGURATION
# =============================================================================

@dataclass
class ValidationConfig:
    """Configuration for advisory data validation checks."""

    quadrats_per_transect: int = 10

    # Percent cover bounds
    min_percent_cover: float = 0.0
    max_percent_cover: float = 100.0


VALIDATION_CONFIG = ValidationConfig()
