"""
Field Survey Pipeline - quadrat cover and diversity by transect.

Turns three packed raw survey tables (quadrat observations, site
management, species lookup) into one summary row per transect.

Public API
----------
Core configuration:
    PROJECT_ROOT, RAW_DIR, FINAL_DIR
    RAW_TABLE_CONFIG, CLEANING_CONFIG, COLUMN_TYPES,
    AGGREGATION_CONFIG, VALIDATION_CONFIG

Loading:
    RawTables, load_raw_tables

Pipeline:
    run_full_pipeline, PipelineResult

Errors:
    SurveyPipelineError, MalformedTableError, MalformedRowError,
    CastError, AmbiguousJoinKeyError, InvariantViolationError
"""

__version__ = "0.1.0"


# Re-export core configuration
from .config import (
    PROJECT_ROOT,
    RAW_DIR,
    FINAL_DIR,
    RAW_TABLE_CONFIG,
    CLEANING_CONFIG,
    COLUMN_TYPES,
    AGGREGATION_CONFIG,
    VALIDATION_CONFIG,
)

# Re-export error taxonomy
from .exceptions import (
    SurveyPipelineError,
    MalformedTableError,
    MalformedRowError,
    CastError,
    AmbiguousJoinKeyError,
    InvariantViolationError,
)

# Re-export loading and pipeline entry points
from .parsing import RawTables, load_raw_tables
from .pipeline import run_full_pipeline, PipelineResult


__all__ = [
    # Version
    "__version__",
    # Configuration
    "PROJECT_ROOT",
    "RAW_DIR",
    "FINAL_DIR",
    "RAW_TABLE_CONFIG",
    "CLEANING_CONFIG",
    "COLUMN_TYPES",
    "AGGREGATION_CONFIG",
    "VALIDATION_CONFIG",
    # Errors
    "SurveyPipelineError",
    "MalformedTableError",
    "MalformedRowError",
    "CastError",
    "AmbiguousJoinKeyError",
    "InvariantViolationError",
    # Loading
    "RawTables",
    "load_raw_tables",
    # Pipeline
    "run_full_pipeline",
    "PipelineResult",
]
