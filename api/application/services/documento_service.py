# api/application/services/documento_service.py
from __future__ import annotations

import random

from api.domain.documento.digitos import gerar, validar
from api.domain.documento.enums import TipoDocumento
from api.domain.documento.value_objects import documento_de

from ..dtos.documento_dto import DocumentoDTO, ValidacaoDocumentoDTO

# Pontuacao aceita na entrada; qualquer outro caractere chega a validar() e reprova.
_PONTUACAO = str.maketrans("", "", ".-/ ")


class DocumentoService:
    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def validar(self, tipo: TipoDocumento, numero: str) -> ValidacaoDocumentoDTO:
        digitos = numero.translate(_PONTUACAO)
        return ValidacaoDocumentoDTO(tipo=tipo.value, digitos=digitos, valido=validar(tipo, digitos))

    def gerar(self, tipo: TipoDocumento) -> DocumentoDTO:
        return self._para_dto(tipo, gerar(tipo, self._rng))

    def interpretar(self, tipo: TipoDocumento, raw: str) -> DocumentoDTO:
        """ValueError se o documento for invalido."""
        return self._para_dto(tipo, raw)

    @staticmethod
    def _para_dto(tipo: TipoDocumento, raw: str) -> DocumentoDTO:
        doc = documento_de(tipo, raw)
        return DocumentoDTO(tipo=tipo.value, valor=doc.valor, formatado=doc.formatado)
