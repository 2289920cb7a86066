"""Assembly modules for analysis and summary tables."""

from .analysis_table import merge_analysis_table, clean_analysis_table
from .summary_assembly import TransectSummaryAssembler, assemble_summary, transect_attributes

__all__ = [
    "merge_analysis_table",
    "clean_analysis_table",
    "TransectSummaryAssembler",
    "assemble_summary",
    "transect_attributes",
]
