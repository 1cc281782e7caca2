# api/infrastructure/repositories/duckdb_pagamento_repo.py
from __future__ import annotations

from datetime import datetime, timezone

import duckdb

from api.domain.pagamento.entities import Pagamento
from api.domain.pagamento.enums import StatusPagamento


class DuckDBPagamentoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(
        self,
        data_inicio: datetime | None = None,
        data_fim: datetime | None = None,
        usuario_id: int | None = None,
    ) -> list[Pagamento]:
        """Filtra por janela de criado_em (inclusiva) e usuario. Mais recentes primeiro."""
        condicoes: list[str] = []
        params: list[object] = []
        if data_inicio is not None:
            condicoes.append("criado_em >= ?")
            params.append(_utc_sem_fuso(data_inicio))
        if data_fim is not None:
            condicoes.append("criado_em <= ?")
            params.append(_utc_sem_fuso(data_fim))
        if usuario_id is not None:
            condicoes.append("fk_usuario = ?")
            params.append(usuario_id)

        where = f"WHERE {' AND '.join(condicoes)}" if condicoes else ""
        # condicoes vem de literais deste metodo, valores vao como parametros
        rows = self._conn.execute(
            f"""SELECT pk_pagamento, valor_centavos, status, criado_em, pago_em,
                       descricao, metodo_pagamento, fk_usuario
                FROM fato_pagamento {where}
                ORDER BY criado_em DESC, pk_pagamento DESC""",  # noqa: S608
            params,
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def _hidratar(self, row: tuple) -> Pagamento:  # type: ignore[type-arg]
        """Colunas: pk(0), valor_centavos(1), status(2), criado_em(3), pago_em(4),
        descricao(5), metodo_pagamento(6), fk_usuario(7)"""
        return Pagamento(
            id=int(row[0]),
            valor_centavos=int(row[1]),
            status=StatusPagamento(str(row[2])),
            criado_em=row[3],
            pago_em=row[4],
            descricao=str(row[5]) if row[5] else None,
            metodo_pagamento=str(row[6]) if row[6] else None,
            usuario_id=int(row[7]) if row[7] is not None else None,
        )


def _utc_sem_fuso(momento: datetime) -> datetime:
    # Colunas TIMESTAMP guardam UTC sem fuso.
    if momento.tzinfo is None:
        return momento
    return momento.astimezone(timezone.utc).replace(tzinfo=None)
