# seed/generate/servicos.py
#
# Services and their staff rosters.
#
# Design decisions:
#   - Candidates for a roster are drawn only from eligible, located staff of
#     the service's own location, then the roster still passes through
#     validar_equipe before it is staged. The domain check is the gate: the
#     generator's own filtering is never trusted on its own.
#   - A roster rejected by the gate is dropped entirely (the service is kept
#     with an empty roster). No partial roster is ever staged.
from __future__ import annotations

import random

import polars as pl

from api.domain.servico.associacao import PERFIS_ASSOCIAVEIS, validar_equipe
from api.domain.usuario.entities import Usuario
from seed.log import log

_TIPOS_SERVICO = (
    "Transfer Aeroporto",
    "City Tour",
    "Transporte Executivo",
    "Passeio Litoral",
    "Transfer Rodoviaria",
    "Evento Corporativo",
)

SCHEMA_SERVICOS: dict[str, pl.DataType] = {
    "pk_servico": pl.Int64(),
    "nome": pl.Utf8(),
    "descricao": pl.Utf8(),
    "fk_localidade": pl.Int64(),
    "ativo": pl.Boolean(),
    "removido_em": pl.Datetime(),
}

SCHEMA_EQUIPES: dict[str, pl.DataType] = {
    "fk_servico": pl.Int64(),
    "fk_usuario": pl.Int64(),
}


def gerar_servicos(
    localidades: pl.DataFrame,
    usuarios: list[Usuario],
    quantidade: int,
    rng: random.Random,
    max_equipe: int = 3,
) -> tuple[pl.DataFrame, pl.DataFrame]:
    """Build dim_servico and bridge_servico_usuario staging frames.

    Returns:
        (servicos, equipes). Every (fk_servico, fk_usuario) pair in ``equipes``
        satisfies the location association rule.
    """
    cidades = dict(zip(localidades["pk_localidade"].to_list(), localidades["cidade"].to_list()))
    loc_ids = sorted(cidades)

    servicos: dict[str, list[object]] = {nome: [] for nome in SCHEMA_SERVICOS}
    equipes: dict[str, list[object]] = {nome: [] for nome in SCHEMA_EQUIPES}
    rejeitadas = 0

    for pk in range(1, quantidade + 1):
        loc_id = loc_ids[(pk - 1) % len(loc_ids)]
        tipo = rng.choice(_TIPOS_SERVICO)
        servicos["pk_servico"].append(pk)
        servicos["nome"].append(f"{tipo} {cidades[loc_id]}")
        servicos["descricao"].append(f"{tipo} com saida de {cidades[loc_id]}")
        servicos["fk_localidade"].append(loc_id)
        servicos["ativo"].append(True)
        servicos["removido_em"].append(None)

        elegiveis = [u for u in usuarios if u.perfil in PERFIS_ASSOCIAVEIS and u.localidade_id == loc_id]
        if not elegiveis:
            continue
        escolhidos = rng.sample(elegiveis, k=min(len(elegiveis), rng.randint(1, max_equipe)))
        ids = sorted(u.id for u in escolhidos)

        resultado = validar_equipe(loc_id, ids, usuarios)
        if resultado is not None:
            rejeitadas += 1
            log(f"  Servico {pk}: equipe descartada ({resultado})")
            continue

        equipes["fk_servico"].extend([pk] * len(ids))
        equipes["fk_usuario"].extend(ids)

    if rejeitadas:
        log(f"  {rejeitadas} equipes descartadas pela regra de localidade")
    return (
        pl.DataFrame(servicos, schema=SCHEMA_SERVICOS),
        pl.DataFrame(equipes, schema=SCHEMA_EQUIPES),
    )
