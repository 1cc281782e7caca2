# api/domain/usuario/repository.py
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Usuario


class UsuarioRepository(Protocol):
    def buscar_ativos_por_ids(self, ids: Sequence[int]) -> list[Usuario]: ...
