# api/domain/servico/associacao.py
#
# Regra de associacao usuario-servico por localidade. Funcao pura, zero IO.
#
# Invariante: para todo Servico S e todo usuario U em S.equipe_ids,
# U.localidade_id existe e e igual a S.localidade_id. A verificacao roda antes
# de qualquer gravacao da equipe, na criacao e em toda atualizacao que altere
# a equipe ou a localidade do proprio servico.
#
# Decisoes:
#   - A regra vale igualmente para ADMIN, AGENCY e SUPPLIER. Nao ha excecao
#     por perfil (ver DESIGN.md, questao em aberto sobre administradores).
#   - Todos os infratores sao reportados de uma vez, separados em dois grupos
#     disjuntos, para o operador corrigir a submissao numa unica passada.
#   - Os candidatos chegam com localidade_id ja resolvido pelo chamador. Este
#     modulo nunca busca nada.
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from api.domain.erros import ErroDeValidacao
from api.domain.usuario.entities import Usuario
from api.domain.usuario.enums import PerfilUsuario

# Perfis que podem compor a equipe de um servico. CUSTOMER nunca.
PERFIS_ASSOCIAVEIS: frozenset[PerfilUsuario] = frozenset(
    {PerfilUsuario.ADMIN, PerfilUsuario.AGENCY, PerfilUsuario.SUPPLIER}
)


@dataclass(frozen=True)
class CandidatoEquipe:
    id: int
    nome: str
    localidade_id: int | None = None

    @classmethod
    def de_usuario(cls, usuario: Usuario) -> CandidatoEquipe:
        return cls(id=usuario.id, nome=usuario.nome, localidade_id=usuario.localidade_id)


@dataclass(frozen=True)
class ViolacaoLocalidade:
    """Violacao estruturada. Os dois grupos sao disjuntos e ao menos um e nao-vazio."""

    localidade_servico_id: int
    sem_localidade: tuple[CandidatoEquipe, ...]
    localidade_divergente: tuple[CandidatoEquipe, ...]

    def __post_init__(self) -> None:
        if not self.sem_localidade and not self.localidade_divergente:
            raise ValueError("ViolacaoLocalidade exige ao menos um usuario infrator")

    @property
    def ids_sem_localidade(self) -> list[int]:
        return [c.id for c in self.sem_localidade]

    @property
    def ids_localidade_divergente(self) -> list[int]:
        return [c.id for c in self.localidade_divergente]

    @property
    def mensagem(self) -> str:
        partes: list[str] = []
        if self.sem_localidade:
            partes.append(
                "os seguintes usuarios nao podem ser associados pois nao possuem "
                "localidade cadastrada: " + _nomes(self.sem_localidade)
            )
        if self.localidade_divergente:
            partes.append(
                "os seguintes usuarios nao podem ser associados pois sua localidade "
                "difere da do servico: " + _nomes(self.localidade_divergente)
            )
        texto = "; ".join(partes) + "."
        return texto[0].upper() + texto[1:]

    def __str__(self) -> str:
        return self.mensagem


def verificar_associacao(
    localidade_servico_id: int,
    candidatos: Iterable[CandidatoEquipe],
) -> ViolacaoLocalidade | None:
    """None quando todos os candidatos estao na localidade do servico.

    Mesma entrada = mesma saida. A ordem dos infratores segue a dos candidatos.
    """
    sem_localidade: list[CandidatoEquipe] = []
    divergentes: list[CandidatoEquipe] = []
    for candidato in candidatos:
        if candidato.localidade_id is None:
            sem_localidade.append(candidato)
        elif candidato.localidade_id != localidade_servico_id:
            divergentes.append(candidato)

    if not sem_localidade and not divergentes:
        return None
    return ViolacaoLocalidade(
        localidade_servico_id=localidade_servico_id,
        sem_localidade=tuple(sem_localidade),
        localidade_divergente=tuple(divergentes),
    )


def verificar_existencia(ids_solicitados: Sequence[int], usuarios: Iterable[Usuario]) -> ErroDeValidacao | None:
    """Todo id solicitado precisa corresponder a um usuario ativo."""
    encontrados = {u.id for u in usuarios}
    ausentes = [i for i in dict.fromkeys(ids_solicitados) if i not in encontrados]
    if not ausentes:
        return None
    return ErroDeValidacao(
        "Usuarios nao encontrados: " + ", ".join(str(i) for i in ausentes)
    )


def verificar_perfis(usuarios: Iterable[Usuario]) -> ErroDeValidacao | None:
    """Somente ADMIN, AGENCY e SUPPLIER podem ser associados a um servico."""
    inelegiveis = [u for u in usuarios if u.perfil not in PERFIS_ASSOCIAVEIS]
    if not inelegiveis:
        return None
    return ErroDeValidacao(
        "Os seguintes usuarios nao podem ser associados ao servico; apenas perfis "
        "AGENCY, SUPPLIER ou ADMIN sao permitidos: "
        + ", ".join(u.nome for u in inelegiveis)
    )


def validar_equipe(
    localidade_servico_id: int,
    ids_solicitados: Sequence[int],
    usuarios: Sequence[Usuario],
) -> ErroDeValidacao | ViolacaoLocalidade | None:
    """Verificacao completa de uma equipe proposta, na ordem: existencia, perfil,
    localidade. None significa que a equipe pode ser gravada.

    ``usuarios`` sao as projecoes ja buscadas pelo chamador para ``ids_solicitados``.
    """
    erro = verificar_existencia(ids_solicitados, usuarios)
    if erro is not None:
        return erro

    solicitados = set(ids_solicitados)
    equipe = [u for u in usuarios if u.id in solicitados]

    erro = verificar_perfis(equipe)
    if erro is not None:
        return erro

    return verificar_associacao(
        localidade_servico_id,
        (CandidatoEquipe.de_usuario(u) for u in equipe),
    )


def auditar_equipe(
    localidade_servico_id: int,
    ids_gravados: Sequence[int],
    usuarios: Sequence[Usuario],
) -> list[ErroDeValidacao | ViolacaoLocalidade]:
    """Todas as falhas de uma equipe ja gravada, sem parar na primeira.

    Usuarios ausentes (removidos depois da gravacao) nao escondem os demais
    infratores: a localidade e conferida para todos os que ainda existem.
    Lista vazia significa equipe consistente.
    """
    gravados = set(ids_gravados)
    equipe = [u for u in usuarios if u.id in gravados]
    achados: list[ErroDeValidacao | ViolacaoLocalidade] = []
    for achado in (
        verificar_existencia(ids_gravados, usuarios),
        verificar_perfis(equipe),
        verificar_associacao(localidade_servico_id, (CandidatoEquipe.de_usuario(u) for u in equipe)),
    ):
        if achado is not None:
            achados.append(achado)
    return achados


def _nomes(candidatos: Iterable[CandidatoEquipe]) -> str:
    return ", ".join(c.nome for c in candidatos)
