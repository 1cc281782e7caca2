# api/domain/pagamento/repository.py
from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import Pagamento


class PagamentoRepository(Protocol):
    def listar(
        self,
        data_inicio: datetime | None = None,
        data_fim: datetime | None = None,
        usuario_id: int | None = None,
    ) -> list[Pagamento]: ...
