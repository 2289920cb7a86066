"""
Loader for the three raw survey tables.

Each raw table holds a single packed text column whose values are the
comma-joined fields of one record:

- observations: transect_number,quadrat,species,percent_cover
- management:   transect_number,size,date,...,management_unit
- species:      species,origin,growth_form,type
"""

import pandas as pd
from pathlib import Path
from typing import Dict, Optional
from dataclasses import dataclass
import logging

from fieldsurvey.config import RAW_DIR, RAW_TABLE_CONFIG
from fieldsurvey.exceptions import MalformedTableError
from fieldsurvey.utils.io import read_packed_text

logger = logging.getLogger(__name__)

TABLE_NAMES = ("observations", "management", "species")


@dataclass(frozen=True)
class RawTables:
    """The three raw packed tables, exactly as supplied."""
    observations: pd.DataFrame
    management: pd.DataFrame
    species: pd.DataFrame

    @classmethod
    def from_frames(
        cls,
        observations: pd.DataFrame,
        management: pd.DataFrame,
        species: pd.DataFrame,
    ) -> "RawTables":
        """Build from in-memory frames, checking each has one packed column."""
        tables = {
            "observations": observations,
            "management": management,
            "species": species,
        }
        for name, df in tables.items():
            check_packed_shape(df, name)
        return cls(**{name: df.copy() for name, df in tables.items()})

    def row_counts(self) -> Dict[str, int]:
        return {name: len(getattr(self, name)) for name in TABLE_NAMES}


def check_packed_shape(df: pd.DataFrame, table: str) -> None:
    """Raise MalformedTableError unless ``df`` has exactly one column."""
    if len(df.columns) != 1:
        raise MalformedTableError(table=table, columns=list(df.columns))


def load_raw_table(path: Path, table: Optional[str] = None) -> pd.DataFrame:
    """
    Load one raw packed table from disk.

    Args:
        path: Raw file, one packed value per line after a packed header
        table: Name used in error messages (defaults to the file stem)

    Returns:
        Single-column DataFrame of packed strings
    """
    table = table or path.stem
    df = read_packed_text(path, separator=RAW_TABLE_CONFIG.file_separator)
    check_packed_shape(df, table)
    logger.info(f"Loaded {table}: {len(df):,} packed rows from {path.name}")
    return df


def load_raw_tables(raw_dir: Optional[Path] = None) -> RawTables:
    """
    Load observations, management and species tables from ``raw_dir``.

    File names come from RAW_TABLE_CONFIG.
    """
    raw_dir = Path(raw_dir) if raw_dir is not None else RAW_DIR

    files = {
        "observations": RAW_TABLE_CONFIG.observations_file,
        "management": RAW_TABLE_CONFIG.management_file,
        "species": RAW_TABLE_CONFIG.species_file,
    }

    tables = {
        name: load_raw_table(raw_dir / filename, table=name)
        for name, filename in files.items()
    }
    return RawTables(**tables)
