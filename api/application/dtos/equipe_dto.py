# api/application/dtos/equipe_dto.py
from pydantic import BaseModel, Field, PositiveInt


class EquipeRequest(BaseModel):
    usuario_ids: list[PositiveInt] = Field(default_factory=list)


class NovaEquipeRequest(BaseModel):
    localidade_id: PositiveInt
    usuario_ids: list[PositiveInt] = Field(default_factory=list)


class UsuarioInfratorDTO(BaseModel):
    id: int
    nome: str


class ValidacaoEquipeDTO(BaseModel):
    valida: bool
    localidade_servico_id: int
    mensagem: str | None = None
    sem_localidade: list[UsuarioInfratorDTO] = Field(default_factory=list)
    localidade_divergente: list[UsuarioInfratorDTO] = Field(default_factory=list)
