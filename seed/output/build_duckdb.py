# seed/output/build_duckdb.py
#
# Atomic DuckDB build: staging Parquet files -> final .duckdb artifact.
#
# Design decisions:
#   - Written to a .tmp.duckdb first and renamed only when the build succeeds.
#     On any failure the tmp file is deleted and the previous output is
#     untouched. The API never serves a partially-built database.
#   - Schema comes from schema.sql, the single source of truth for tables.
#   - Before the rename, the location association rule is re-checked in SQL
#     over the loaded rosters. A violating roster aborts the whole build.
#   - The mapping staging stem -> table is explicit. Order matters: dimensions
#     before the bridge and fact tables that reference them.
from __future__ import annotations

from pathlib import Path

import duckdb

from seed.log import log

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

STAGING_TO_TABLE: dict[str, str] = {
    "localidades": "dim_localidade",
    "usuarios": "dim_usuario",
    "servicos": "dim_servico",
    "equipes": "bridge_servico_usuario",
    "pagamentos": "fato_pagamento",
}

_SQL_VIOLACOES = """
    SELECT b.fk_servico, b.fk_usuario
    FROM bridge_servico_usuario b
    JOIN dim_servico s ON s.pk_servico = b.fk_servico
    JOIN dim_usuario u ON u.pk_usuario = b.fk_usuario
    WHERE u.fk_localidade IS NULL OR u.fk_localidade <> s.fk_localidade
    ORDER BY b.fk_servico, b.fk_usuario
"""


class InvarianteEquipeError(Exception):
    """Raised when a loaded roster breaks the location association rule."""


def build_duckdb(staging_dir: Path, output_path: Path) -> Path:
    """Build the DuckDB database atomically from staging Parquet files.

    Returns:
        output_path after a successful atomic rename.

    Raises:
        InvarianteEquipeError: if any roster pairs a user with a service in a
            different (or missing) location. output_path is left untouched.
        Any duckdb or filesystem exception propagates after tmp cleanup.
    """
    tmp_path = output_path.with_suffix(".tmp.duckdb")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Stale tmp from a previous crashed run.
    if tmp_path.exists():
        tmp_path.unlink()

    try:
        conn = duckdb.connect(str(tmp_path))
        try:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
            _load_staging_data(conn, staging_dir)
            verificar_equipes(conn)
        finally:
            conn.close()

        if output_path.exists():
            output_path.unlink()
        tmp_path.rename(output_path)
        return output_path

    except Exception:
        if tmp_path.exists():
            tmp_path.unlink()
        raise


def verificar_equipes(conn: duckdb.DuckDBPyConnection) -> None:
    """Raises InvarianteEquipeError listing every offending (servico, usuario) pair."""
    violacoes = conn.execute(_SQL_VIOLACOES).fetchall()
    if violacoes:
        pares = ", ".join(f"servico={s}/usuario={u}" for s, u in violacoes)
        raise InvarianteEquipeError(f"Equipes fora da localidade do servico: {pares}")


def _load_staging_data(conn: duckdb.DuckDBPyConnection, staging_dir: Path) -> None:
    """Load every existing staging Parquet into its table. Missing files are
    skipped; completude.py is responsible for required ones."""
    loaded = 0
    for file_stem, table_name in STAGING_TO_TABLE.items():
        parquet_path = staging_dir / f"{file_stem}.parquet"
        if not parquet_path.exists():
            continue

        log(f"  Loading {file_stem} -> {table_name}...")

        # table_name comes from STAGING_TO_TABLE and the path is local, neither
        # is user-controlled.
        table_cols = [
            row[0]
            for row in conn.execute(
                "SELECT column_name FROM information_schema.columns "
                "WHERE table_name = ? ORDER BY ordinal_position",
                [table_name],
            ).fetchall()
        ]
        posix_path = parquet_path.as_posix()
        parquet_cols = {
            row[0]
            for row in conn.execute(
                f"SELECT name FROM parquet_schema('{posix_path}')"  # noqa: S608
            ).fetchall()
        }

        shared_cols = [c for c in table_cols if c in parquet_cols]
        if not shared_cols:
            continue

        cols_sql = ", ".join(shared_cols)
        conn.execute(
            f"INSERT INTO {table_name} ({cols_sql}) "  # noqa: S608
            f"SELECT {cols_sql} FROM read_parquet('{posix_path}')"
        )
        loaded += 1

    log(f"  DuckDB: {loaded} tables loaded")


def validate_tables(output_path: Path) -> dict[str, int]:
    """Open the finished DuckDB read-only and return row counts per table."""
    conn = duckdb.connect(str(output_path), read_only=True)
    try:
        counts: dict[str, int] = {}
        for (table_name,) in conn.execute("SHOW TABLES").fetchall():
            row = conn.execute(f"SELECT COUNT(*) FROM {table_name}").fetchone()  # noqa: S608
            counts[table_name] = int(row[0]) if row else 0
        return counts
    finally:
        conn.close()
