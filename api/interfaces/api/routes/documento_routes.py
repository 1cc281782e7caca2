# api/interfaces/api/routes/documento_routes.py
from fastapi import APIRouter, Depends, HTTPException

from api.application.dtos.documento_dto import (
    DocumentoDTO,
    ValidacaoDocumentoDTO,
    ValidacaoDocumentoRequest,
)
from api.application.services.documento_service import DocumentoService
from api.domain.documento.enums import TipoDocumento
from api.interfaces.api.dependencies import get_documento_service

router = APIRouter()


@router.post("/documentos/validacao", response_model=ValidacaoDocumentoDTO)
def validar_documento(
    body: ValidacaoDocumentoRequest,
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> ValidacaoDocumentoDTO:
    # Documento invalido e resultado de negocio, nao erro HTTP.
    return service.validar(body.tipo, body.numero)


@router.get("/documentos/gerado", response_model=DocumentoDTO)
def gerar_documento(
    tipo: TipoDocumento,
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> DocumentoDTO:
    return service.gerar(tipo)


@router.get("/documentos/{tipo}/{numero_raw}", response_model=DocumentoDTO)
def interpretar_documento(
    tipo: TipoDocumento,
    numero_raw: str,
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> DocumentoDTO:
    try:
        return service.interpretar(tipo, numero_raw)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=f"{tipo.value} invalido") from err
