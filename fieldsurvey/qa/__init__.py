"""Quality assurance utilities."""

from .validators import validate_analysis_table, validate_summary_table, ValidationResult
from .reporters import generate_qa_report

__all__ = [
    "validate_analysis_table",
    "validate_summary_table",
    "ValidationResult",
    "generate_qa_report",
]
