# seed/output/completude.py
#
# Completude validation: asserts that all required staging files are present
# and non-empty before the DuckDB build begins.
#
# Design decisions:
#   - Pure guard: reads files, never writes. Raised exceptions are the only
#     side effect.
#   - equipes is optional: a seed with no eligible staff anywhere still yields
#     a valid database, just with empty rosters.
from __future__ import annotations

from pathlib import Path

import polars as pl

from seed.log import log

REQUIRED_SOURCES: tuple[str, ...] = (
    "localidades",
    "usuarios",
    "servicos",
    "pagamentos",
)

OPTIONAL_SOURCES: tuple[str, ...] = (
    "equipes",
)


class CompletudeError(Exception):
    """Raised when a required staging file is missing or empty. The message
    always names the offending file."""


def validar_completude(staging_dir: Path) -> None:
    """Raises CompletudeError if any required file is absent or has zero rows."""
    for source in REQUIRED_SOURCES:
        path = staging_dir / f"{source}.parquet"

        if not path.exists():
            raise CompletudeError(f"Missing staging file: {source}.parquet (expected at {path})")

        if _contar_linhas(path) == 0:
            raise CompletudeError(f"Empty staging file: {source}.parquet (0 rows). Re-run the seed.")

    for source in OPTIONAL_SOURCES:
        path = staging_dir / f"{source}.parquet"
        if not path.exists():
            log(f"  WARNING: optional source '{source}' missing - skipping.")
        elif _contar_linhas(path) == 0:
            log(f"  WARNING: optional source '{source}' has 0 rows - skipping.")


def _contar_linhas(path: Path) -> int:
    return int(pl.scan_parquet(path).select(pl.len()).collect().item())
