# api/application/dtos/documento_dto.py
from pydantic import BaseModel, Field

from api.domain.documento.enums import TipoDocumento


class ValidacaoDocumentoRequest(BaseModel):
    tipo: TipoDocumento
    numero: str = Field(min_length=1, max_length=20)


class ValidacaoDocumentoDTO(BaseModel):
    tipo: str
    digitos: str
    valido: bool


class DocumentoDTO(BaseModel):
    tipo: str
    valor: str
    formatado: str
