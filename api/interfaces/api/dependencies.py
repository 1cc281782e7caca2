# api/interfaces/api/dependencies.py
from collections.abc import Generator

import duckdb
from fastapi import Depends

from api.application.services.documento_service import DocumentoService
from api.application.services.equipe_service import EquipeService
from api.application.services.relatorio_service import RelatorioService
from api.infrastructure.duckdb_connection import get_cursor
from api.infrastructure.repositories.duckdb_localidade_repo import DuckDBLocalidadeRepo
from api.infrastructure.repositories.duckdb_pagamento_repo import DuckDBPagamentoRepo
from api.infrastructure.repositories.duckdb_servico_repo import DuckDBServicoRepo
from api.infrastructure.repositories.duckdb_usuario_repo import DuckDBUsuarioRepo


def get_conn() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    cursor = get_cursor()
    try:
        yield cursor
    finally:
        cursor.close()


def get_documento_service() -> DocumentoService:
    return DocumentoService()


def get_equipe_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_conn),  # noqa: B008
) -> EquipeService:
    return EquipeService(
        servico_repo=DuckDBServicoRepo(conn),
        usuario_repo=DuckDBUsuarioRepo(conn),
        localidade_repo=DuckDBLocalidadeRepo(conn),
    )


def get_relatorio_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_conn),  # noqa: B008
) -> RelatorioService:
    return RelatorioService(pagamento_repo=DuckDBPagamentoRepo(conn))


def get_localidade_repo(
    conn: duckdb.DuckDBPyConnection = Depends(get_conn),  # noqa: B008
) -> DuckDBLocalidadeRepo:
    return DuckDBLocalidadeRepo(conn)
