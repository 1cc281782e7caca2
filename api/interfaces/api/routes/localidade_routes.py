# api/interfaces/api/routes/localidade_routes.py
from fastapi import APIRouter, Depends

from api.application.dtos.localidade_dto import LocalidadeDTO
from api.infrastructure.repositories.duckdb_localidade_repo import DuckDBLocalidadeRepo
from api.interfaces.api.dependencies import get_localidade_repo

router = APIRouter()


@router.get("/localidades", response_model=list[LocalidadeDTO])
def listar_localidades(
    repo: DuckDBLocalidadeRepo = Depends(get_localidade_repo),  # noqa: B008
) -> list[LocalidadeDTO]:
    return [LocalidadeDTO(id=loc.id, cidade=loc.cidade, uf=loc.uf) for loc in repo.listar()]
