# api/interfaces/api/routes/relatorio_routes.py
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from api.application.dtos.relatorio_dto import RelatorioFinanceiroDTO
from api.application.services.relatorio_service import RelatorioService
from api.interfaces.api.dependencies import get_relatorio_service

router = APIRouter()


@router.get("/relatorios/financeiro", response_model=RelatorioFinanceiroDTO)
def get_relatorio_financeiro(
    data_inicio: datetime | None = Query(default=None),  # noqa: B008
    data_fim: datetime | None = Query(default=None),  # noqa: B008
    usuario_id: int | None = Query(default=None, gt=0),  # noqa: B008
    service: RelatorioService = Depends(get_relatorio_service),  # noqa: B008
) -> RelatorioFinanceiroDTO:
    try:
        return service.relatorio_financeiro(data_inicio, data_fim, usuario_id)
    except ValueError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
