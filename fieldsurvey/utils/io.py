"""
File I/O utilities.

Helper functions for reading raw packed tables and writing
pipeline outputs with consistent error handling and logging.
"""

from pathlib import Path
import csv
import logging
import pandas as pd

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> Path:
    """
    Ensure directory exists, creating if necessary.

    Parameters
    ----------
    path : Path
        Directory path to ensure exists.

    Returns
    -------
    Path
        The input path (for chaining).
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_packed_text(path: Path, separator: str = "\t") -> pd.DataFrame:
    """
    Read a raw packed table as literal text.

    Every value is kept as a string, so missing-value tokens such as
    ``NA`` survive until the casting stage decides what they mean.

    Parameters
    ----------
    path : Path
        Path to the raw file. The first line is the header.
    separator : str
        Column separator of the file (not the packed-field delimiter).

    Returns
    -------
    pd.DataFrame
        Loaded table, all columns of dtype object.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Raw table not found: {path}")

    df = pd.read_csv(
        path,
        sep=separator,
        dtype=str,
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
    )
    logger.debug(f"Read {len(df):,} rows from {path.name}")
    return df


def save_parquet(
    df: pd.DataFrame,
    path: Path,
    compression: str = "snappy",
) -> Path:
    """
    Save DataFrame to parquet with logging.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to save.
    path : Path
        Output path.
    compression : str
        Compression algorithm.

    Returns
    -------
    Path
        The output path.
    """
    ensure_dir(path.parent)
    df.to_parquet(path, compression=compression, index=False)
    logger.info(f"Saved {len(df):,} rows to {path.name}")
    return path
