# api/infrastructure/duckdb_connection.py
from __future__ import annotations

import logging

import duckdb

from .config import get_settings

logger = logging.getLogger(__name__)

_connection: duckdb.DuckDBPyConnection | None = None


def get_connection() -> duckdb.DuckDBPyConnection:
    """Conexao unica do processo. Somente leitura quando aponta para arquivo:
    a API nunca grava, quem grava e o pipeline de seed."""
    global _connection  # noqa: PLW0603
    if _connection is None:
        path = get_settings().duckdb_path
        read_only = path != ":memory:"
        logger.info("Abrindo DuckDB em %s (read_only=%s)", path, read_only)
        _connection = duckdb.connect(path, read_only=read_only)
    return _connection


def get_cursor() -> duckdb.DuckDBPyConnection:
    """Cursor proprio por requisicao; a conexao compartilhada nao e thread-safe."""
    return get_connection().cursor()


def set_connection(conn: duckdb.DuckDBPyConnection | None) -> None:
    """Usado em testes para injetar DuckDB in-memory."""
    global _connection  # noqa: PLW0603
    _connection = conn
