# api/infrastructure/repositories/duckdb_servico_repo.py
from __future__ import annotations

import duckdb

from api.domain.servico.entities import Servico


class DuckDBServicoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_id(self, servico_id: int) -> Servico | None:
        row = self._conn.execute(
            """SELECT pk_servico, nome, fk_localidade, ativo
               FROM dim_servico
               WHERE pk_servico = ? AND removido_em IS NULL""",
            [servico_id],
        ).fetchone()
        if row is None:
            return None

        equipe = self._conn.execute(
            "SELECT fk_usuario FROM bridge_servico_usuario WHERE fk_servico = ?",
            [servico_id],
        ).fetchall()
        return Servico(
            id=int(row[0]),
            nome=str(row[1]),
            localidade_id=int(row[2]),
            equipe_ids=frozenset(int(r[0]) for r in equipe),
            ativo=bool(row[3]),
        )
