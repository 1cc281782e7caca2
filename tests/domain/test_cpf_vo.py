import pytest

from api.domain.documento.enums import TipoDocumento
from api.domain.documento.value_objects import CPF, documento_de


def test_cpf_valido_formatado():
    cpf = CPF("111.444.777-35")
    assert cpf.valor == "11144477735"
    assert cpf.formatado == "111.444.777-35"


def test_cpf_digito_verificador_invalido():
    with pytest.raises(ValueError, match="CPF invalido"):
        CPF("111.444.777-00")


def test_cpf_todos_iguais_invalido():
    """Aritmeticamente validos, mas placeholders conhecidos."""
    with pytest.raises(ValueError):
        CPF("111.111.111-11")
    with pytest.raises(ValueError):
        CPF("00000000000")


def test_cpf_comprimento_errado():
    with pytest.raises(ValueError):
        CPF("123")


def test_cpf_repr_nunca_mostra_completo():
    """CPF nunca aparece completo em logs/repr (LGPD)."""
    cpf = CPF("11144477735")
    assert "11144477735" not in repr(cpf)
    assert "11144477735" not in str(cpf)
    assert str(cpf) == "***.444.777-**"


def test_cpf_igualdade_por_valor():
    a = CPF("11144477735")
    b = CPF("111.444.777-35")
    assert a == b
    assert hash(a) == hash(b)


def test_documento_de_cpf():
    doc = documento_de(TipoDocumento.CPF, "529.982.247-25")
    assert isinstance(doc, CPF)
    assert doc.tipo is TipoDocumento.CPF
