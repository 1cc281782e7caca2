# api/domain/documento/value_objects.py
from __future__ import annotations

from dataclasses import dataclass

from .digitos import validar
from .enums import TipoDocumento


def _limpar(raw: str) -> str:
    return "".join(c for c in raw if "0" <= c <= "9")


def _verificar(tipo: TipoDocumento, digitos: str) -> None:
    if len(digitos) != tipo.comprimento:
        raise ValueError(
            f"{tipo.value} invalido: comprimento {len(digitos)}, esperado {tipo.comprimento}"
        )
    if len(set(digitos)) == 1:
        raise ValueError(f"{tipo.value} invalido: todos digitos iguais")
    if not validar(tipo, digitos):
        raise ValueError(f"{tipo.value} invalido: digitos verificadores incorretos")


@dataclass(frozen=True)
class CPF:
    """Value Object imutavel para CPF. NUNCA expoe valor completo em repr/str (LGPD)."""

    _valor: str  # sempre 11 digitos

    def __init__(self, raw: str) -> None:
        digitos = _limpar(raw)
        _verificar(TipoDocumento.CPF, digitos)
        object.__setattr__(self, "_valor", digitos)

    @property
    def tipo(self) -> TipoDocumento:
        return TipoDocumento.CPF

    @property
    def valor(self) -> str:
        """11 digitos sem formatacao. Nunca logar."""
        return self._valor

    @property
    def formatado(self) -> str:
        d = self._valor
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-**, formato seguro para logs."""
        d = self._valor
        return f"***.{d[3:6]}.{d[6:9]}-**"

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


@dataclass(frozen=True)
class CNPJ:
    """Value Object imutavel para CNPJ. Valida digitos verificadores no construtor."""

    _valor: str  # sempre 14 digitos sem formatacao

    def __init__(self, raw: str) -> None:
        digitos = _limpar(raw)
        _verificar(TipoDocumento.CNPJ, digitos)
        object.__setattr__(self, "_valor", digitos)

    @property
    def tipo(self) -> TipoDocumento:
        return TipoDocumento.CNPJ

    @property
    def valor(self) -> str:
        """14 digitos sem formatacao."""
        return self._valor

    @property
    def formatado(self) -> str:
        """XX.XXX.XXX/XXXX-XX"""
        d = self._valor
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


Documento = CPF | CNPJ


def documento_de(tipo: TipoDocumento, raw: str) -> Documento:
    """Constroi o value object do tipo informado. ValueError se invalido."""
    if tipo is TipoDocumento.CPF:
        return CPF(raw)
    return CNPJ(raw)
