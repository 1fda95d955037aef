"""
I/O module: read the UNdata life expectancy export and write derived tables.
"""

import logging
from pathlib import Path

import pandas as pd

from . import config

logger = logging.getLogger(__name__)

# UNdata exports are UTF-8 with a byte-order mark
SOURCE_ENCODING = "utf-8-sig"

def load_observations_csv(filepath, **kwargs):
    """
    Load the raw life expectancy export.

    Key columns are read as strings so periods such as "2000-2005" and
    numeric-looking country codes are never coerced. The UNdata footnote
    block at the end of the file is kept for the cleaning step to drop.

    Args:
        filepath: Path to the export
        **kwargs: Additional arguments for pd.read_csv()

    Returns:
        pd.DataFrame with the source column names
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Life expectancy export not found: {filepath}")

    kwargs.setdefault("dtype", {col: str for col in config.REQUIRED_COLUMNS if col != "Value"})
    kwargs.setdefault("encoding", SOURCE_ENCODING)
    df = pd.read_csv(filepath, **kwargs)
    logger.info("Read %d rows from %s (%.2f MB)", len(df), filepath.name, file_size_mb(filepath))
    return df

def save_table(df, filepath, **kwargs):
    """
    Write a derived table as CSV without its index.

    Args:
        df: cross-tabulation, comparison or ranking table
        filepath: Output path; parent folders are created
        **kwargs: Additional arguments for df.to_csv()

    Returns:
        Path to saved file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    df.to_csv(filepath, index=False, **kwargs)
    logger.info("Wrote %d rows to %s", len(df), filepath)
    return filepath

def file_size_mb(filepath):
    """Size of a file in MB."""
    return Path(filepath).stat().st_size / (1024 ** 2)
