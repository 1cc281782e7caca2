# api/domain/documento/digitos.py
"""Aritmetica dos digitos verificadores de CPF e CNPJ. Funcao pura, zero IO.

Um unico modulo cobre as duas direcoes: calcular (usado na geracao para seed)
e validar (usado no cadastro). Nenhuma dependencia de biblioteca externa.
"""

from __future__ import annotations

import random

from api.domain.erros import ViolacaoDeContrato

from .enums import TipoDocumento

_PESOS_CNPJ_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_PESOS_CNPJ_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def calcular_digitos_verificadores(tipo: TipoDocumento, digitos_base: str) -> tuple[int, int]:
    """Calcula (d1, d2) a partir dos digitos iniciais.

    Raises:
        ViolacaoDeContrato: se ``digitos_base`` nao tiver o comprimento do tipo
            (9 para CPF, 12 para CNPJ) ou contiver caractere nao numerico.
    """
    if len(digitos_base) != tipo.comprimento_base or not _apenas_ascii_digitos(digitos_base):
        raise ViolacaoDeContrato(
            f"{tipo.value}: esperados {tipo.comprimento_base} digitos iniciais, "
            f"recebido {len(digitos_base)} caracteres"
        )

    valores = [int(c) for c in digitos_base]
    if tipo is TipoDocumento.CPF:
        d1 = _digito_cpf(valores)
        d2 = _digito_cpf(valores + [d1])
    else:
        d1 = _digito_cnpj(valores, _PESOS_CNPJ_1)
        d2 = _digito_cnpj(valores + [d1], _PESOS_CNPJ_2)
    return d1, d2


def validar(tipo: TipoDocumento, digitos: str) -> bool:
    """True somente se os dois ultimos digitos batem com os recalculados.

    Nunca levanta excecao: valor que nao e str, comprimento errado ou
    caractere nao numerico retornam False sem nenhum calculo.
    """
    if not isinstance(digitos, str):
        return False
    if len(digitos) != tipo.comprimento or not _apenas_ascii_digitos(digitos):
        return False
    d1, d2 = calcular_digitos_verificadores(tipo, digitos[: tipo.comprimento_base])
    return digitos[-2:] == f"{d1}{d2}"


def gerar(tipo: TipoDocumento, rng: random.Random | None = None) -> str:
    """Documento aleatorio com digitos verificadores validos. Uso exclusivo de seed.

    Placeholders com todos os digitos iguais sao sorteados de novo, para que o
    resultado seja sempre aceito pelos value objects CPF/CNPJ.
    """
    sorteio = rng or random.Random()
    while True:
        base = "".join(str(sorteio.randint(0, 9)) for _ in range(tipo.comprimento_base))
        d1, d2 = calcular_digitos_verificadores(tipo, base)
        digitos = f"{base}{d1}{d2}"
        if len(set(digitos)) > 1:
            return digitos


def _digito_cpf(valores: list[int]) -> int:
    # Pesos decrescentes a partir de len+1: 10..2 para d1, 11..2 para d2.
    peso_inicial = len(valores) + 1
    soma = sum(v * (peso_inicial - i) for i, v in enumerate(valores))
    return (soma * 10) % 11 % 10


def _digito_cnpj(valores: list[int], pesos: tuple[int, ...]) -> int:
    resto = sum(v * p for v, p in zip(valores, pesos)) % 11
    return 0 if resto < 2 else 11 - resto


def _apenas_ascii_digitos(texto: str) -> bool:
    # str.isdigit aceita digitos unicode como "²"; aqui so 0-9.
    return all("0" <= c <= "9" for c in texto)
