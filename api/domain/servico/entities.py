# api/domain/servico/entities.py
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Servico:
    """Oferta de transporte/passeio. equipe_ids deve sempre satisfazer a regra de
    associacao por localidade (ver associacao.py) relativa a localidade_id."""

    id: int
    nome: str
    localidade_id: int
    equipe_ids: frozenset[int] = field(default_factory=frozenset)
    ativo: bool = True
