# seed/generate/localidades.py
#
# Fixed set of locations served by the back office.
#
# Invariant: (cidade, uf) is unique. Each row goes through the Localidade
# entity so the seed never writes a location the API would reject.
from __future__ import annotations

import polars as pl

from api.domain.localidade.entities import Localidade

LOCALIDADES: tuple[tuple[str, str], ...] = (
    ("Sao Paulo", "SP"),
    ("Rio de Janeiro", "RJ"),
    ("Belo Horizonte", "MG"),
    ("Porto Alegre", "RS"),
    ("Salvador", "BA"),
    ("Brasilia", "DF"),
)

SCHEMA: dict[str, pl.DataType] = {
    "pk_localidade": pl.Int64(),
    "cidade": pl.Utf8(),
    "uf": pl.Utf8(),
}


def gerar_localidades(pares: tuple[tuple[str, str], ...] = LOCALIDADES) -> pl.DataFrame:
    """Build the dim_localidade staging frame with sequential ids starting at 1.

    Raises:
        ValueError: on an invalid city/UF or a duplicated (cidade, uf) pair.
    """
    vistas: set[tuple[str, str]] = set()
    linhas: list[Localidade] = []
    for i, (cidade, uf) in enumerate(pares, start=1):
        loc = Localidade(id=i, cidade=cidade, uf=uf)
        if loc.chave in vistas:
            raise ValueError(f"Localidade duplicada: {loc}")
        vistas.add(loc.chave)
        linhas.append(loc)

    return pl.DataFrame(
        {
            "pk_localidade": [loc.id for loc in linhas],
            "cidade": [loc.cidade for loc in linhas],
            "uf": [loc.uf for loc in linhas],
        },
        schema=SCHEMA,
    )
