"""
Splitter for packed raw columns.

Turns the single comma-joined column of each raw table into named text
columns. Splitting is strict: a value with the wrong number of tokens
aborts the run, since the survey sheets are hand-curated and a mismatch
means the upstream file is corrupt.
"""

import pandas as pd
from typing import Dict, Sequence
from dataclasses import dataclass
import logging

from fieldsurvey.config import RAW_TABLE_CONFIG
from fieldsurvey.exceptions import MalformedRowError
from fieldsurvey.parsing.raw_loader import RawTables, check_packed_shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitTables:
    """Post-split text tables."""
    observations: pd.DataFrame
    management: pd.DataFrame
    species: pd.DataFrame

    def row_counts(self) -> Dict[str, int]:
        return {
            "observations": len(self.observations),
            "management": len(self.management),
            "species": len(self.species),
        }


def split_packed_column(
    table: pd.DataFrame,
    fields: Sequence[str],
    delimiter: str = ",",
    table_name: str = "table",
) -> pd.DataFrame:
    """
    Split a one-column packed table into ``len(fields)`` text columns.

    The delimiter is matched literally and tokens are kept verbatim, so
    ``delimiter.join(tokens)`` gives back the packed value.

    Args:
        table: Single-column DataFrame of packed strings
        fields: Output column names, in packed order
        delimiter: Field delimiter inside a packed value
        table_name: Name used in error messages

    Returns:
        New DataFrame with one text column per field

    Raises:
        MalformedTableError: If ``table`` does not have exactly one column
        MalformedRowError: If any value does not split into len(fields) tokens
    """
    check_packed_shape(table, table_name)
    fields = list(fields)
    packed = table.iloc[:, 0]

    rows = []
    for row, value in packed.items():
        if not isinstance(value, str):
            raise MalformedRowError(
                table=table_name, row=row, value=value,
                expected=len(fields), actual=0,
            )
        tokens = value.split(delimiter)
        if len(tokens) != len(fields):
            raise MalformedRowError(
                table=table_name, row=row, value=value,
                expected=len(fields), actual=len(tokens),
            )
        rows.append(tokens)

    split = pd.DataFrame(rows, columns=fields, dtype=object)
    logger.debug(f"Split {table_name}: {len(split):,} rows into {len(fields)} fields")
    return split


def split_raw_tables(raw: RawTables) -> SplitTables:
    """Split all three raw tables using the field lists in RAW_TABLE_CONFIG."""
    cfg = RAW_TABLE_CONFIG
    return SplitTables(
        observations=split_packed_column(
            raw.observations, cfg.observation_fields, cfg.delimiter, "observations"
        ),
        management=split_packed_column(
            raw.management, cfg.management_fields, cfg.delimiter, "management"
        ),
        species=split_packed_column(
            raw.species, cfg.species_fields, cfg.delimiter, "species"
        ),
    )
