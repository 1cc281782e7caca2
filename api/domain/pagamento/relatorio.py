# api/domain/pagamento/relatorio.py
"""Relatorio financeiro sobre pagamentos ja filtrados. Funcao pura, zero IO.

ADR: Toda a aritmetica e inteira (centavos). Nenhum float entra na agregacao.
ADR: Agrupamento mensal pela data de criacao (nao de pagamento), em UTC,
independente do fuso do host. Datetimes sem fuso sao tratados como UTC.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

from .entities import Pagamento
from .enums import StatusPagamento

QTD_PAGAMENTOS_RECENTES = 10


@dataclass(frozen=True)
class ResumoFinanceiro:
    total_pagamentos: int
    pagamentos_pagos: int
    pagamentos_pendentes: int
    pagamentos_cancelados: int
    valor_total: int
    valor_total_pago: int
    valor_total_pendente: int
    valor_total_cancelado: int
    ticket_medio: int


@dataclass(frozen=True)
class DadosMensais:
    valor_total: int
    qtd_transacoes: int


@dataclass(frozen=True)
class RelatorioFinanceiro:
    resumo: ResumoFinanceiro
    mensal: dict[str, DadosMensais]  # "YYYY-MM" em ordem crescente
    recentes: tuple[Pagamento, ...]


def resumir(pagamentos: Iterable[Pagamento]) -> ResumoFinanceiro:
    """Contagens e somas particionadas estritamente por status."""
    qtd = dict.fromkeys(StatusPagamento, 0)
    soma = dict.fromkeys(StatusPagamento, 0)
    for p in pagamentos:
        qtd[p.status] += 1
        soma[p.status] += p.valor_centavos

    total = sum(qtd.values())
    valor_total = sum(soma.values())
    return ResumoFinanceiro(
        total_pagamentos=total,
        pagamentos_pagos=qtd[StatusPagamento.PAID],
        pagamentos_pendentes=qtd[StatusPagamento.PENDING],
        pagamentos_cancelados=qtd[StatusPagamento.CANCELLED],
        valor_total=valor_total,
        valor_total_pago=soma[StatusPagamento.PAID],
        valor_total_pendente=soma[StatusPagamento.PENDING],
        valor_total_cancelado=soma[StatusPagamento.CANCELLED],
        ticket_medio=media_inteira(valor_total, total),
    )


def agrupar_por_mes(pagamentos: Iterable[Pagamento]) -> dict[str, DadosMensais]:
    """Buckets "YYYY-MM" pelo mes de criado_em (UTC), todos os status inclusos."""
    valores: dict[str, int] = {}
    contagens: dict[str, int] = {}
    for p in pagamentos:
        mes = chave_mes(p.criado_em)
        valores[mes] = valores.get(mes, 0) + p.valor_centavos
        contagens[mes] = contagens.get(mes, 0) + 1
    return {
        mes: DadosMensais(valor_total=valores[mes], qtd_transacoes=contagens[mes])
        for mes in sorted(valores)
    }


def gerar_relatorio(pagamentos: Sequence[Pagamento]) -> RelatorioFinanceiro:
    """Funcao pura. Mesma entrada = mesma saida, inclusive na ordem dos recentes."""
    recentes = sorted(
        pagamentos,
        key=lambda p: (em_utc(p.criado_em), p.id),
        reverse=True,
    )[:QTD_PAGAMENTOS_RECENTES]
    return RelatorioFinanceiro(
        resumo=resumir(pagamentos),
        mensal=agrupar_por_mes(pagamentos),
        recentes=tuple(recentes),
    )


def media_inteira(total: int, quantidade: int) -> int:
    """total / quantidade arredondado meia-para-cima, em inteiros. 0 se quantidade == 0."""
    if quantidade == 0:
        return 0
    return (2 * total + quantidade) // (2 * quantidade)


def chave_mes(momento: datetime) -> str:
    utc = em_utc(momento)
    return f"{utc.year:04d}-{utc.month:02d}"


def em_utc(momento: datetime) -> datetime:
    if momento.tzinfo is None:
        return momento.replace(tzinfo=timezone.utc)
    return momento.astimezone(timezone.utc)
