# api/domain/localidade/entities.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Localidade:
    """Cidade/UF. Unica pelo par (cidade, uf)."""

    id: int
    cidade: str
    uf: str

    def __post_init__(self) -> None:
        cidade = self.cidade.strip()
        uf = self.uf.strip().upper()
        if not 2 <= len(cidade) <= 100:
            raise ValueError("Cidade deve ter entre 2 e 100 caracteres")
        if len(uf) != 2 or not uf.isalpha():
            raise ValueError(f"UF invalida: {self.uf!r}")
        object.__setattr__(self, "cidade", cidade)
        object.__setattr__(self, "uf", uf)

    @property
    def chave(self) -> tuple[str, str]:
        """Chave de unicidade, insensivel a caixa na cidade."""
        return self.cidade.casefold(), self.uf

    def __str__(self) -> str:
        return f"{self.cidade}/{self.uf}"
