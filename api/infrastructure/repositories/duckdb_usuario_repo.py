# api/infrastructure/repositories/duckdb_usuario_repo.py
from __future__ import annotations

import logging
from collections.abc import Sequence

import duckdb

from api.domain.documento.enums import TipoDocumento
from api.domain.documento.value_objects import Documento, documento_de
from api.domain.usuario.entities import Usuario
from api.domain.usuario.enums import PerfilUsuario

logger = logging.getLogger(__name__)


class DuckDBUsuarioRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_ativos_por_ids(self, ids: Sequence[int]) -> list[Usuario]:
        """Usuarios nao removidos entre ``ids``, ordenados por id."""
        unicos = list(dict.fromkeys(ids))
        if not unicos:
            return []
        placeholders = ", ".join("?" for _ in unicos)
        # placeholders sao apenas "?" gerados aqui; os valores vao como parametros
        rows = self._conn.execute(
            f"""SELECT pk_usuario, nome, perfil, fk_localidade, documento, tipo_documento
                FROM dim_usuario
                WHERE removido_em IS NULL AND pk_usuario IN ({placeholders})
                ORDER BY pk_usuario""",  # noqa: S608
            unicos,
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def _hidratar(self, row: tuple) -> Usuario:  # type: ignore[type-arg]
        """Colunas: pk(0), nome(1), perfil(2), fk_localidade(3), documento(4), tipo_documento(5)"""
        return Usuario(
            id=int(row[0]),
            nome=str(row[1]),
            perfil=PerfilUsuario(str(row[2])),
            localidade_id=int(row[3]) if row[3] is not None else None,
            documento=_documento(int(row[0]), row[4], row[5]),
        )


def _documento(usuario_id: int, valor: object, tipo: object) -> Documento | None:
    # Cadastro legado pode ter documento que os value objects recusam; o
    # usuario continua utilizavel, so sem documento.
    if not valor or not tipo:
        return None
    try:
        return documento_de(TipoDocumento(str(tipo)), str(valor))
    except ValueError:
        logger.warning("Documento invalido ignorado para usuario %s", usuario_id)
        return None
