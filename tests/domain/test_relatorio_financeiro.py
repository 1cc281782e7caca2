# tests/domain/test_relatorio_financeiro.py
#
# Agregacao financeira em centavos. Pure domain tests, zero IO.
from datetime import datetime, timedelta, timezone

import pytest

from api.domain.pagamento.entities import Pagamento
from api.domain.pagamento.enums import StatusPagamento
from api.domain.pagamento.relatorio import (
    QTD_PAGAMENTOS_RECENTES,
    agrupar_por_mes,
    chave_mes,
    gerar_relatorio,
    media_inteira,
    resumir,
)

PAID = StatusPagamento.PAID
PENDING = StatusPagamento.PENDING
CANCELLED = StatusPagamento.CANCELLED


def _pagamento(id: int, valor: int, status: StatusPagamento, criado_em: datetime) -> Pagamento:
    return Pagamento(id=id, valor_centavos=valor, status=status, criado_em=criado_em)


def test_resumo_basico():
    pagamentos = [
        _pagamento(1, 1000, PAID, datetime(2025, 5, 1)),
        _pagamento(2, 500, PENDING, datetime(2025, 5, 2)),
    ]
    resumo = resumir(pagamentos)
    assert resumo.total_pagamentos == 2
    assert resumo.pagamentos_pagos == 1
    assert resumo.pagamentos_pendentes == 1
    assert resumo.pagamentos_cancelados == 0
    assert resumo.valor_total == 1500
    assert resumo.valor_total_pago == 1000
    assert resumo.valor_total_pendente == 500
    assert resumo.valor_total_cancelado == 0
    assert resumo.ticket_medio == 750


def test_resumo_vazio_tudo_zero():
    relatorio = gerar_relatorio([])
    assert relatorio.resumo.total_pagamentos == 0
    assert relatorio.resumo.valor_total == 0
    assert relatorio.resumo.ticket_medio == 0
    assert relatorio.mensal == {}
    assert relatorio.recentes == ()


def test_particao_por_status_fecha_com_total():
    pagamentos = [
        _pagamento(i, 100 * i, status, datetime(2025, 1, i))
        for i, status in enumerate([PAID, PAID, PENDING, CANCELLED, CANCELLED], start=1)
    ]
    r = resumir(pagamentos)
    assert r.pagamentos_pagos + r.pagamentos_pendentes + r.pagamentos_cancelados == r.total_pagamentos
    assert r.valor_total_pago + r.valor_total_pendente + r.valor_total_cancelado == r.valor_total
    assert r.valor_total_cancelado == 900


def test_mensal_inclui_todos_os_status_e_ordena_chaves():
    pagamentos = [
        _pagamento(1, 300, CANCELLED, datetime(2025, 6, 3)),
        _pagamento(2, 1000, PAID, datetime(2025, 5, 10)),
        _pagamento(3, 500, PENDING, datetime(2025, 5, 20)),
    ]
    mensal = agrupar_por_mes(pagamentos)
    assert list(mensal) == ["2025-05", "2025-06"]
    assert mensal["2025-05"].valor_total == 1500
    assert mensal["2025-05"].qtd_transacoes == 2
    assert mensal["2025-06"].valor_total == 300


def test_mes_calculado_em_utc():
    # 31/05 22:30 em Sao Paulo e 01/06 01:30 em UTC
    sao_paulo = timezone(timedelta(hours=-3))
    momento = datetime(2025, 5, 31, 22, 30, tzinfo=sao_paulo)
    assert chave_mes(momento) == "2025-06"


def test_datetime_sem_fuso_tratado_como_utc():
    assert chave_mes(datetime(2025, 5, 31, 23, 59)) == "2025-05"


def test_soma_mensal_igual_ao_total():
    pagamentos = [
        _pagamento(i, 137 * i, [PAID, PENDING, CANCELLED][i % 3], datetime(2025, 1 + i % 4, 1 + i))
        for i in range(1, 20)
    ]
    relatorio = gerar_relatorio(pagamentos)
    assert sum(m.valor_total for m in relatorio.mensal.values()) == relatorio.resumo.valor_total
    assert sum(m.qtd_transacoes for m in relatorio.mensal.values()) == relatorio.resumo.total_pagamentos


@pytest.mark.parametrize(
    "total,quantidade,esperado",
    [(0, 0, 0), (1500, 2, 750), (10, 4, 3), (10, 3, 3), (5, 2, 3), (7, 2, 4), (1, 3, 0)],
)
def test_media_inteira_arredonda_meia_para_cima(total, quantidade, esperado):
    assert media_inteira(total, quantidade) == esperado


def test_recentes_mais_novos_primeiro_limitados():
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    pagamentos = [_pagamento(i, 100, PAID, base + timedelta(days=i)) for i in range(1, 16)]
    recentes = gerar_relatorio(pagamentos).recentes
    assert len(recentes) == QTD_PAGAMENTOS_RECENTES
    assert [p.id for p in recentes] == list(range(15, 5, -1))


def test_recentes_desempate_por_id():
    momento = datetime(2025, 3, 1)
    pagamentos = [_pagamento(i, 100, PAID, momento) for i in (4, 9, 2)]
    assert [p.id for p in gerar_relatorio(pagamentos).recentes] == [9, 4, 2]


@pytest.mark.parametrize("valor", [-1, 10.5, True])
def test_pagamento_rejeita_valor_invalido(valor):
    with pytest.raises(ValueError):
        Pagamento(id=1, valor_centavos=valor, status=PAID, criado_em=datetime(2025, 1, 1))
