# api/domain/pagamento/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .enums import StatusPagamento


@dataclass(frozen=True)
class Pagamento:
    """Valor em centavos (int). Nunca float. Imutavel depois de agregado."""

    id: int
    valor_centavos: int
    status: StatusPagamento
    criado_em: datetime
    pago_em: datetime | None = None
    descricao: str | None = None
    metodo_pagamento: str | None = None
    usuario_id: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.valor_centavos, bool) or not isinstance(self.valor_centavos, int):
            raise ValueError("Valor do pagamento deve ser inteiro em centavos")
        if self.valor_centavos < 0:
            raise ValueError("Valor do pagamento nao pode ser negativo")
