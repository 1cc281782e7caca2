# seed/staging/parquet_writer.py
#
# Standardised Parquet writes for staging data. Every generator output goes
# through write_parquet, so staging files always land in a created directory.
from __future__ import annotations

from pathlib import Path

import polars as pl


def write_parquet(df: pl.DataFrame, path: Path) -> Path:
    """Write a DataFrame to Parquet, creating parent directories as needed.

    Returns:
        ``path``, for call-chain convenience.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(path)
    return path

