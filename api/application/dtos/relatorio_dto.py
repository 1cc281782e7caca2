# api/application/dtos/relatorio_dto.py
from pydantic import BaseModel


class ResumoFinanceiroDTO(BaseModel):
    total_pagamentos: int
    pagamentos_pagos: int
    pagamentos_pendentes: int
    pagamentos_cancelados: int
    valor_total: int
    valor_total_pago: int
    valor_total_pendente: int
    valor_total_cancelado: int
    ticket_medio: int


class DadosMensaisDTO(BaseModel):
    valor_total: int
    qtd_transacoes: int


class PagamentoDTO(BaseModel):
    id: int
    valor_centavos: int
    status: str
    criado_em: str
    pago_em: str | None
    descricao: str | None
    metodo_pagamento: str | None
    usuario_id: int | None


class RelatorioFinanceiroDTO(BaseModel):
    """Valores sempre em centavos; formatacao de moeda fica com o cliente."""

    resumo: ResumoFinanceiroDTO
    mensal: dict[str, DadosMensaisDTO]
    recentes: list[PagamentoDTO]
