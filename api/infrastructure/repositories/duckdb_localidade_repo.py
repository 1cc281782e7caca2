# api/infrastructure/repositories/duckdb_localidade_repo.py
from __future__ import annotations

import duckdb

from api.domain.localidade.entities import Localidade


class DuckDBLocalidadeRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_id(self, localidade_id: int) -> Localidade | None:
        row = self._conn.execute(
            "SELECT pk_localidade, cidade, uf FROM dim_localidade WHERE pk_localidade = ?",
            [localidade_id],
        ).fetchone()
        if row is None:
            return None
        return Localidade(id=int(row[0]), cidade=str(row[1]), uf=str(row[2]))

    def listar(self) -> list[Localidade]:
        rows = self._conn.execute(
            "SELECT pk_localidade, cidade, uf FROM dim_localidade ORDER BY uf, cidade",
        ).fetchall()
        return [Localidade(id=int(r[0]), cidade=str(r[1]), uf=str(r[2])) for r in rows]
