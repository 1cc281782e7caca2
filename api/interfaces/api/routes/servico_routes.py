# api/interfaces/api/routes/servico_routes.py
from fastapi import APIRouter, Depends, HTTPException

from api.application.dtos.equipe_dto import EquipeRequest, NovaEquipeRequest, ValidacaoEquipeDTO
from api.application.services.equipe_service import EquipeService
from api.interfaces.api.dependencies import get_equipe_service

router = APIRouter()


def _responder(resultado: ValidacaoEquipeDTO | None, nao_encontrado: str) -> ValidacaoEquipeDTO:
    if resultado is None:
        raise HTTPException(status_code=404, detail=nao_encontrado)
    if not resultado.valida:
        raise HTTPException(status_code=400, detail=resultado.model_dump())
    return resultado


@router.post("/servicos/equipe/validacao", response_model=ValidacaoEquipeDTO)
def validar_equipe_nova(
    body: NovaEquipeRequest,
    service: EquipeService = Depends(get_equipe_service),  # noqa: B008
) -> ValidacaoEquipeDTO:
    resultado = service.validar_para_localidade(body.localidade_id, body.usuario_ids)
    return _responder(resultado, "Localidade nao encontrada")


@router.post("/servicos/{servico_id}/equipe/validacao", response_model=ValidacaoEquipeDTO)
def validar_equipe_servico(
    servico_id: int,
    body: EquipeRequest,
    service: EquipeService = Depends(get_equipe_service),  # noqa: B008
) -> ValidacaoEquipeDTO:
    resultado = service.validar_para_servico(servico_id, body.usuario_ids)
    return _responder(resultado, "Servico nao encontrado")


@router.get("/servicos/{servico_id}/equipe/auditoria", response_model=ValidacaoEquipeDTO)
def auditar_equipe(
    servico_id: int,
    service: EquipeService = Depends(get_equipe_service),  # noqa: B008
) -> ValidacaoEquipeDTO:
    resultado = service.auditar(servico_id)
    if resultado is None:
        raise HTTPException(status_code=404, detail="Servico nao encontrado")
    # Auditoria sempre responde 200: o veredito esta no corpo.
    return resultado
