"""
Transect-level summary file assembly.

Merges:
- percent cover (BG_pc, E_pc)
- LEFT JOIN diversity (E_diversity, NF_diversity) ON transect_number
- LEFT JOIN transect attributes (management, years_since) ON transect_number

Outputs one row per transect, ordered by transect_number.
"""

import pandas as pd
from typing import Any, Dict, List, Optional
import logging

from fieldsurvey.aggregation import compute_percent_cover, compute_diversity
from fieldsurvey.config import AGGREGATION_CONFIG, AggregationConfig
from fieldsurvey.exceptions import InvariantViolationError
from fieldsurvey.utils.frames import distinct_rows, duplicated_keys, left_join

logger = logging.getLogger(__name__)


def transect_attributes(
    cleaned: pd.DataFrame,
    attributes: Optional[List[str]] = None,
) -> pd.DataFrame:
    """
    Distinct (transect_number, *attributes) rows of the cleaned table.

    Raises:
        InvariantViolationError: If a transect has more than one distinct
            combination of attribute values
    """
    attributes = attributes or AGGREGATION_CONFIG.transect_attributes
    distinct = distinct_rows(cleaned, ["transect_number", *attributes])

    dupes = duplicated_keys(distinct, "transect_number")
    if dupes:
        transect = dupes[0]
        rows = distinct[distinct["transect_number"] == transect]
        values = {}
        for col in attributes:
            col_values = rows[col].drop_duplicates().tolist()
            if len(col_values) > 1:
                values[col] = col_values
        raise InvariantViolationError(transect_number=transect, values=values)

    return distinct


class TransectSummaryAssembler:
    """
    Assembles the final transect-level summary table.

    Implements the merge logic:
    - percent cover LEFT JOIN diversity ON transect_number
    - LEFT JOIN distinct transect attributes ON transect_number
    """

    def __init__(
        self,
        cleaned: pd.DataFrame,
        config: Optional[AggregationConfig] = None,
    ):
        self.cleaned = cleaned
        self.config = config or AGGREGATION_CONFIG

        self._cover: Optional[pd.DataFrame] = None
        self._diversity: Optional[pd.DataFrame] = None
        self._attributes: Optional[pd.DataFrame] = None
        self._assembled: Optional[pd.DataFrame] = None

    def assemble(self) -> pd.DataFrame:
        """Run both aggregation passes and join them with transect attributes."""
        self._cover = compute_percent_cover(self.cleaned, self.config)
        self._diversity = compute_diversity(self.cleaned, self.config)
        self._attributes = transect_attributes(self.cleaned, self.config.transect_attributes)

        summary = left_join(self._cover, self._diversity, "transect_number", right_name="diversity")
        summary = left_join(
            summary, self._attributes, "transect_number", right_name="transect_attributes"
        )

        summary = (
            summary.sort_values("transect_number")
            .reset_index(drop=True)[self.config.summary_columns]
            .copy()
        )
        summary["management"] = summary["management"].astype("category")

        self._assembled = summary
        logger.info(f"Assembled transect summary: {len(summary)} transects")
        return summary

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics of the assembled table."""
        if self._assembled is None:
            self.assemble()

        df = self._assembled
        return {
            "total_transects": len(df),
            "bg_cover_coverage": df["BG_pc"].notna().mean() if len(df) else 0.0,
            "e_cover_coverage": df["E_pc"].notna().mean() if len(df) else 0.0,
            "management_categories": sorted(df["management"].dropna().astype(str).unique()),
            "mean_e_diversity": df["E_diversity"].mean(),
            "mean_nf_diversity": df["NF_diversity"].mean(),
        }


def assemble_summary(cleaned: pd.DataFrame) -> pd.DataFrame:
    """Build the transect summary from the cleaned analysis table."""
    return TransectSummaryAssembler(cleaned).assemble()
