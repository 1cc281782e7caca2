import dataclasses

import pytest

from api.domain.documento.enums import TipoDocumento
from api.domain.documento.value_objects import CNPJ, documento_de


def test_cnpj_valido_formatado():
    """Aceita CNPJ com pontuacao e armazena sem formatacao."""
    cnpj = CNPJ("11.222.333/0001-81")
    assert cnpj.valor == "11222333000181"


def test_cnpj_valido_sem_formatacao():
    cnpj = CNPJ("11222333000181")
    assert cnpj.formatado == "11.222.333/0001-81"
    assert cnpj.tipo is TipoDocumento.CNPJ


def test_cnpj_digitos_verificadores_invalidos():
    with pytest.raises(ValueError, match="CNPJ invalido"):
        CNPJ("11.222.333/0001-99")


def test_cnpj_todos_iguais_invalido():
    with pytest.raises(ValueError, match="todos digitos iguais"):
        CNPJ("00.000.000/0000-00")


def test_cnpj_comprimento_errado():
    with pytest.raises(ValueError, match="comprimento"):
        CNPJ("123")


def test_cnpj_imutavel():
    cnpj = CNPJ("11222333000181")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cnpj._valor = "outro"  # type: ignore[misc]


def test_cnpj_igualdade_por_valor():
    a = CNPJ("11222333000181")
    b = CNPJ("11.222.333/0001-81")
    assert a == b
    assert hash(a) == hash(b)
    assert a != CNPJ("33000167000101")


def test_documento_de_escolhe_value_object():
    assert isinstance(documento_de(TipoDocumento.CNPJ, "11222333000181"), CNPJ)
    with pytest.raises(ValueError):
        documento_de(TipoDocumento.CNPJ, "11144477735")
