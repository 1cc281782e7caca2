# seed/generate/usuarios.py
#
# Synthetic users for every role, with checksum-valid documents.
#
# Design decisions:
#   - ADMIN and CUSTOMER carry a CPF; AGENCY and SUPPLIER carry a CNPJ.
#   - Documents come from api.domain.documento.digitos.gerar and are re-parsed
#     through the CPF/CNPJ value objects, so the seed and the API share one
#     checksum implementation.
#   - Staff roles are spread round-robin over the locations. One in every five
#     customers has no location, mirroring real sign-ups that skip the field.
#   - All randomness flows from the injected random.Random.
from __future__ import annotations

import random

import polars as pl

from api.domain.documento.digitos import gerar
from api.domain.documento.enums import TipoDocumento
from api.domain.documento.value_objects import documento_de
from api.domain.usuario.entities import Usuario
from api.domain.usuario.enums import PerfilUsuario

_PRIMEIROS_NOMES = (
    "Joao", "Maria", "Pedro", "Carla", "Roberto", "Fernanda", "Anderson",
    "Juliana", "Ricardo", "Patricia", "Lucas", "Beatriz", "Rafael", "Camila",
)
_SOBRENOMES = (
    "Silva", "Santos", "Costa", "Lima", "Oliveira", "Souza", "Alves",
    "Pereira", "Ribeiro", "Carvalho", "Gomes", "Martins",
)
_AGENCIAS = (
    "Turismo", "Viagens", "Explore", "Aventura", "Destinos", "Mundo", "Elite", "Rota",
)
_FORNECEDORES = ("Transfer", "Executivo", "Express", "Premium", "Luxo", "Rodas")

SCHEMA: dict[str, pl.DataType] = {
    "pk_usuario": pl.Int64(),
    "nome": pl.Utf8(),
    "email": pl.Utf8(),
    "perfil": pl.Utf8(),
    "fk_localidade": pl.Int64(),
    "documento": pl.Utf8(),
    "tipo_documento": pl.Utf8(),
    "aprovado": pl.Boolean(),
    "removido_em": pl.Datetime(),
}

_TIPO_POR_PERFIL: dict[PerfilUsuario, TipoDocumento] = {
    PerfilUsuario.ADMIN: TipoDocumento.CPF,
    PerfilUsuario.AGENCY: TipoDocumento.CNPJ,
    PerfilUsuario.SUPPLIER: TipoDocumento.CNPJ,
    PerfilUsuario.CUSTOMER: TipoDocumento.CPF,
}


def gerar_usuarios(
    localidade_ids: list[int],
    quantidades: dict[PerfilUsuario, int],
    rng: random.Random,
) -> pl.DataFrame:
    """Build the dim_usuario staging frame.

    Args:
        localidade_ids: ids of existing locations; must be non-empty.
        quantidades:    how many users to create per role.
        rng:            random source; same seed, same frame.
    """
    if not localidade_ids:
        raise ValueError("gerar_usuarios requires at least one location")

    documentos_usados: set[str] = set()
    cols: dict[str, list[object]] = {nome: [] for nome in SCHEMA}
    pk = 0
    for perfil in PerfilUsuario:
        for i in range(quantidades.get(perfil, 0)):
            pk += 1
            tipo = _TIPO_POR_PERFIL[perfil]
            documento = _documento_unico(tipo, rng, documentos_usados)
            sem_localidade = perfil is PerfilUsuario.CUSTOMER and i % 5 == 4

            cols["pk_usuario"].append(pk)
            cols["nome"].append(_nome(perfil, rng))
            cols["email"].append(f"{perfil.value.lower()}{pk}@seed.local")
            cols["perfil"].append(perfil.value)
            cols["fk_localidade"].append(None if sem_localidade else localidade_ids[i % len(localidade_ids)])
            cols["documento"].append(documento)
            cols["tipo_documento"].append(tipo.value)
            # fornecedores aguardam aprovacao de vez em quando
            cols["aprovado"].append(not (perfil is PerfilUsuario.SUPPLIER and rng.random() < 0.15))
            cols["removido_em"].append(None)

    return pl.DataFrame(cols, schema=SCHEMA)


def usuarios_de(df: pl.DataFrame) -> list[Usuario]:
    """Domain projections of the active rows of a dim_usuario frame."""
    return [
        Usuario(
            id=row["pk_usuario"],
            nome=row["nome"],
            perfil=PerfilUsuario(row["perfil"]),
            localidade_id=row["fk_localidade"],
        )
        for row in df.iter_rows(named=True)
        if row["removido_em"] is None
    ]


def _documento_unico(tipo: TipoDocumento, rng: random.Random, usados: set[str]) -> str:
    while True:
        doc = documento_de(tipo, gerar(tipo, rng)).valor
        if doc not in usados:
            usados.add(doc)
            return doc


def _nome(perfil: PerfilUsuario, rng: random.Random) -> str:
    if perfil is PerfilUsuario.AGENCY:
        return f"{rng.choice(_AGENCIAS)} {rng.choice(_SOBRENOMES)} Turismo"
    if perfil is PerfilUsuario.SUPPLIER:
        return f"{rng.choice(_FORNECEDORES)} {rng.choice(_SOBRENOMES)} Ltda"
    return f"{rng.choice(_PRIMEIROS_NOMES)} {rng.choice(_SOBRENOMES)}"
