# api/domain/servico/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Servico


class ServicoRepository(Protocol):
    def buscar_por_id(self, servico_id: int) -> Servico | None: ...
