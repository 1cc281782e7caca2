# api/domain/localidade/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Localidade


class LocalidadeRepository(Protocol):
    def buscar_por_id(self, localidade_id: int) -> Localidade | None: ...
    def listar(self) -> list[Localidade]: ...
