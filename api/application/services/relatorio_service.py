# api/application/services/relatorio_service.py
from __future__ import annotations

from datetime import datetime

from api.domain.pagamento.entities import Pagamento
from api.domain.pagamento.relatorio import em_utc, gerar_relatorio
from api.domain.pagamento.repository import PagamentoRepository

from ..dtos.relatorio_dto import (
    DadosMensaisDTO,
    PagamentoDTO,
    RelatorioFinanceiroDTO,
    ResumoFinanceiroDTO,
)


class RelatorioService:
    def __init__(self, pagamento_repo: PagamentoRepository) -> None:
        self._pagamento_repo = pagamento_repo

    def relatorio_financeiro(
        self,
        data_inicio: datetime | None = None,
        data_fim: datetime | None = None,
        usuario_id: int | None = None,
    ) -> RelatorioFinanceiroDTO:
        """ValueError se a janela estiver invertida."""
        if data_inicio is not None and data_fim is not None and em_utc(data_inicio) > em_utc(data_fim):
            raise ValueError("data_inicio deve ser anterior ou igual a data_fim")

        pagamentos = self._pagamento_repo.listar(data_inicio, data_fim, usuario_id)
        relatorio = gerar_relatorio(pagamentos)
        r = relatorio.resumo
        return RelatorioFinanceiroDTO(
            resumo=ResumoFinanceiroDTO(
                total_pagamentos=r.total_pagamentos,
                pagamentos_pagos=r.pagamentos_pagos,
                pagamentos_pendentes=r.pagamentos_pendentes,
                pagamentos_cancelados=r.pagamentos_cancelados,
                valor_total=r.valor_total,
                valor_total_pago=r.valor_total_pago,
                valor_total_pendente=r.valor_total_pendente,
                valor_total_cancelado=r.valor_total_cancelado,
                ticket_medio=r.ticket_medio,
            ),
            mensal={
                mes: DadosMensaisDTO(valor_total=d.valor_total, qtd_transacoes=d.qtd_transacoes)
                for mes, d in relatorio.mensal.items()
            },
            recentes=[_pagamento_dto(p) for p in relatorio.recentes],
        )


def _pagamento_dto(p: Pagamento) -> PagamentoDTO:
    return PagamentoDTO(
        id=p.id,
        valor_centavos=p.valor_centavos,
        status=p.status.value,
        criado_em=p.criado_em.isoformat(),
        pago_em=p.pago_em.isoformat() if p.pago_em else None,
        descricao=p.descricao,
        metodo_pagamento=p.metodo_pagamento,
        usuario_id=p.usuario_id,
    )
