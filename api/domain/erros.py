# api/domain/erros.py
from __future__ import annotations

from dataclasses import dataclass


class ViolacaoDeContrato(Exception):
    """Chamador passou dados fora da pre-condicao da funcao. Erro de programacao,
    nunca um resultado de negocio."""


@dataclass(frozen=True)
class ErroDeValidacao:
    """Falha recuperavel: o chamador corrige a entrada e reenvia."""

    mensagem: str

    def __post_init__(self) -> None:
        if not self.mensagem.strip():
            raise ValueError("ErroDeValidacao exige mensagem nao-vazia")

    def __str__(self) -> str:
        return self.mensagem
