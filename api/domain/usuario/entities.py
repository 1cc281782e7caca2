# api/domain/usuario/entities.py
from __future__ import annotations

from dataclasses import dataclass

from api.domain.documento.value_objects import Documento

from .enums import PerfilUsuario


@dataclass(frozen=True)
class Usuario:
    """Projecao do usuario consumida pelas regras de negocio.
    localidade_id e opcional no cadastro, mas obrigatorio para compor equipe de servico."""

    id: int
    nome: str
    perfil: PerfilUsuario
    localidade_id: int | None = None
    documento: Documento | None = None

    def __post_init__(self) -> None:
        if not self.nome.strip():
            raise ValueError("Nome do usuario nao pode ser vazio")
