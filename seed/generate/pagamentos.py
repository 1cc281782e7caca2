# seed/generate/pagamentos.py
#
# Synthetic payments, amounts in centavos.
#
# Design decisions:
#   - criado_em falls within the 60 days before ``referencia``; paid payments
#     get pago_em up to 7 days after creation. All timestamps are naive UTC.
#   - Status mix: ~70% PAID, ~20% PENDING, ~10% CANCELLED.
#   - 70% of payments are tied to a non-admin user.
from __future__ import annotations

import random
from datetime import datetime, timedelta

import polars as pl

from api.domain.pagamento.entities import Pagamento
from api.domain.pagamento.enums import StatusPagamento
from api.domain.pagamento.relatorio import em_utc
from api.domain.usuario.entities import Usuario
from api.domain.usuario.enums import PerfilUsuario

VALORES_CENTAVOS = (
    4500, 5500, 6500, 7500, 8500, 9000, 9500, 10500, 11000, 12000, 12500, 13500,
    15000, 16500, 18000, 19500, 20000, 22000, 25000, 28000, 32000, 35000, 38000, 250000,
)
DESCRICOES = (
    "Transfer Aeroporto GRU - Executivo VIP",
    "City Tour Sao Paulo - Grupo Empresarial",
    "Transporte Executivo - Reuniao de Negocios",
    "Tour Litoral Paulista - Fim de Semana",
    "City Tour Rio de Janeiro - Turismo",
    "Excursao Campos do Jordao - Turismo",
    "Transfer Hotel - Check-in VIP",
)
METODOS = ("PIX", "Cartao de Credito", "Cartao de Debito", "Transferencia Bancaria", "Dinheiro", "Boleto")

SCHEMA: dict[str, pl.DataType] = {
    "pk_pagamento": pl.Int64(),
    "valor_centavos": pl.Int64(),
    "status": pl.Utf8(),
    "descricao": pl.Utf8(),
    "metodo_pagamento": pl.Utf8(),
    "fk_usuario": pl.Int64(),
    "criado_em": pl.Datetime(),
    "pago_em": pl.Datetime(),
}


def gerar_pagamentos(
    usuarios: list[Usuario],
    quantidade: int,
    referencia: datetime,
    rng: random.Random,
) -> pl.DataFrame:
    """Build the fato_pagamento staging frame. Rows are validated by the Pagamento entity."""
    referencia = em_utc(referencia).replace(tzinfo=None)
    pagadores = [u.id for u in usuarios if u.perfil is not PerfilUsuario.ADMIN]
    cols: dict[str, list[object]] = {nome: [] for nome in SCHEMA}

    for pk in range(1, quantidade + 1):
        criado_em = referencia - timedelta(days=rng.randrange(60), minutes=rng.randrange(24 * 60))
        sorteio = rng.random()
        if sorteio < 0.7:
            status = StatusPagamento.PAID
        elif sorteio < 0.9:
            status = StatusPagamento.PENDING
        else:
            status = StatusPagamento.CANCELLED
        pago_em = None
        metodo = None
        if status is StatusPagamento.PAID:
            pago_em = criado_em + timedelta(minutes=rng.randrange(7 * 24 * 60))
            metodo = rng.choice(METODOS)

        pagamento = Pagamento(
            id=pk,
            valor_centavos=rng.choice(VALORES_CENTAVOS),
            status=status,
            criado_em=criado_em,
            pago_em=pago_em,
            descricao=rng.choice(DESCRICOES),
            metodo_pagamento=metodo,
            usuario_id=rng.choice(pagadores) if pagadores and rng.random() < 0.7 else None,
        )
        cols["pk_pagamento"].append(pagamento.id)
        cols["valor_centavos"].append(pagamento.valor_centavos)
        cols["status"].append(pagamento.status.value)
        cols["descricao"].append(pagamento.descricao)
        cols["metodo_pagamento"].append(pagamento.metodo_pagamento)
        cols["fk_usuario"].append(pagamento.usuario_id)
        cols["criado_em"].append(pagamento.criado_em)
        cols["pago_em"].append(pagamento.pago_em)

    return pl.DataFrame(cols, schema=SCHEMA)
