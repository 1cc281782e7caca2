# api/application/dtos/localidade_dto.py
from pydantic import BaseModel


class LocalidadeDTO(BaseModel):
    id: int
    cidade: str
    uf: str
