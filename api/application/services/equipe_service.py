# api/application/services/equipe_service.py
from __future__ import annotations

import logging
from collections.abc import Sequence

from api.domain.erros import ErroDeValidacao
from api.domain.localidade.repository import LocalidadeRepository
from api.domain.servico.associacao import ViolacaoLocalidade, auditar_equipe, validar_equipe
from api.domain.servico.repository import ServicoRepository
from api.domain.usuario.repository import UsuarioRepository

from ..dtos.equipe_dto import UsuarioInfratorDTO, ValidacaoEquipeDTO

logger = logging.getLogger(__name__)


class EquipeService:
    """Busca as projecoes e delega o veredito a validar_equipe. Nunca grava:
    quem persiste a equipe usa o veredito como porta da transacao."""

    def __init__(
        self,
        servico_repo: ServicoRepository,
        usuario_repo: UsuarioRepository,
        localidade_repo: LocalidadeRepository,
    ) -> None:
        self._servico_repo = servico_repo
        self._usuario_repo = usuario_repo
        self._localidade_repo = localidade_repo

    def validar_para_servico(self, servico_id: int, usuario_ids: Sequence[int]) -> ValidacaoEquipeDTO | None:
        """Equipe proposta para servico existente. None se o servico nao existe."""
        servico = self._servico_repo.buscar_por_id(servico_id)
        if servico is None:
            return None
        return self._validar(servico.localidade_id, usuario_ids)

    def validar_para_localidade(self, localidade_id: int, usuario_ids: Sequence[int]) -> ValidacaoEquipeDTO | None:
        """Equipe proposta para servico novo, ou para mudanca de localidade. None se a localidade nao existe."""
        if self._localidade_repo.buscar_por_id(localidade_id) is None:
            return None
        return self._validar(localidade_id, usuario_ids)

    def auditar(self, servico_id: int) -> ValidacaoEquipeDTO | None:
        """Reverifica a equipe gravada contra a localidade atual do servico.
        Reporta todas as falhas juntas: ausentes, perfis e localidade."""
        servico = self._servico_repo.buscar_por_id(servico_id)
        if servico is None:
            return None
        ids = sorted(servico.equipe_ids)
        usuarios = self._usuario_repo.buscar_ativos_por_ids(ids)
        achados = auditar_equipe(servico.localidade_id, ids, usuarios)
        if not achados:
            return ValidacaoEquipeDTO(valida=True, localidade_servico_id=servico.localidade_id)

        logger.warning("Equipe gravada do servico %s inconsistente: %s", servico_id, achados)
        return _dto_de_achados(servico.localidade_id, achados)

    def _validar(self, localidade_id: int, usuario_ids: Sequence[int]) -> ValidacaoEquipeDTO:
        usuarios = self._usuario_repo.buscar_ativos_por_ids(usuario_ids)
        resultado = validar_equipe(localidade_id, usuario_ids, usuarios)

        if resultado is None:
            return ValidacaoEquipeDTO(valida=True, localidade_servico_id=localidade_id)

        logger.info("Equipe rejeitada para localidade %s: %s", localidade_id, resultado)
        return _dto_de_achados(localidade_id, [resultado])


def _dto_de_achados(
    localidade_id: int,
    achados: Sequence[ErroDeValidacao | ViolacaoLocalidade],
) -> ValidacaoEquipeDTO:
    violacao = next((a for a in achados if isinstance(a, ViolacaoLocalidade)), None)
    if len(achados) == 1:
        mensagem = achados[0].mensagem
    else:
        mensagem = "; ".join(a.mensagem.rstrip(".") for a in achados) + "."
    if violacao is None:
        return ValidacaoEquipeDTO(valida=False, localidade_servico_id=localidade_id, mensagem=mensagem)
    return ValidacaoEquipeDTO(
        valida=False,
        localidade_servico_id=localidade_id,
        mensagem=mensagem,
        sem_localidade=[UsuarioInfratorDTO(id=c.id, nome=c.nome) for c in violacao.sem_localidade],
        localidade_divergente=[
            UsuarioInfratorDTO(id=c.id, nome=c.nome) for c in violacao.localidade_divergente
        ],
    )
