# api/domain/documento/enums.py
from __future__ import annotations

from enum import Enum


class TipoDocumento(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"

    @property
    def comprimento(self) -> int:
        """Total de digitos, incluindo os dois verificadores."""
        return 11 if self is TipoDocumento.CPF else 14

    @property
    def comprimento_base(self) -> int:
        return self.comprimento - 2
