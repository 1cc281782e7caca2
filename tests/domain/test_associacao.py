# tests/domain/test_associacao.py
#
# Regra de associacao por localidade. Pure domain tests, zero IO.
import pytest

from api.domain.erros import ErroDeValidacao
from api.domain.servico.associacao import (
    CandidatoEquipe,
    ViolacaoLocalidade,
    auditar_equipe,
    validar_equipe,
    verificar_associacao,
    verificar_existencia,
    verificar_perfis,
)
from api.domain.usuario.entities import Usuario
from api.domain.usuario.enums import PerfilUsuario


def _candidato(id: int, localidade_id: int | None) -> CandidatoEquipe:
    return CandidatoEquipe(id=id, nome=f"Usuario {id}", localidade_id=localidade_id)


def _usuario(id: int, perfil: PerfilUsuario, localidade_id: int | None = 1) -> Usuario:
    return Usuario(id=id, nome=f"Usuario {id}", perfil=perfil, localidade_id=localidade_id)


def test_todos_na_localidade_do_servico():
    assert verificar_associacao(1, [_candidato(1, 1), _candidato(2, 1)]) is None


def test_sem_candidatos_e_valido():
    assert verificar_associacao(1, []) is None


def test_localidade_divergente():
    violacao = verificar_associacao(1, [_candidato(1, 1), _candidato(2, 2)])
    assert violacao is not None
    assert violacao.ids_localidade_divergente == [2]
    assert violacao.ids_sem_localidade == []


def test_sem_localidade():
    violacao = verificar_associacao(1, [_candidato(3, None)])
    assert violacao is not None
    assert violacao.ids_sem_localidade == [3]
    assert violacao.ids_localidade_divergente == []


def test_reporta_todos_os_infratores_de_uma_vez():
    candidatos = [_candidato(1, None), _candidato(2, 5), _candidato(3, 1), _candidato(4, None)]
    violacao = verificar_associacao(1, candidatos)
    assert violacao.ids_sem_localidade == [1, 4]
    assert violacao.ids_localidade_divergente == [2]
    assert violacao.localidade_servico_id == 1


def test_mensagem_combina_os_dois_grupos():
    violacao = verificar_associacao(1, [_candidato(3, None), _candidato(2, 2)])
    mensagem = violacao.mensagem
    assert mensagem.startswith("Os seguintes usuarios")
    assert "nao possuem localidade cadastrada: Usuario 3" in mensagem
    assert "difere da do servico: Usuario 2" in mensagem
    assert mensagem.endswith(".")
    assert str(violacao) == mensagem


def test_mensagem_so_divergentes_comeca_em_maiuscula():
    violacao = verificar_associacao(1, [_candidato(2, 2)])
    assert violacao.mensagem == (
        "Os seguintes usuarios nao podem ser associados pois sua localidade "
        "difere da do servico: Usuario 2."
    )


def test_mesma_entrada_mesma_saida():
    candidatos = [_candidato(1, None), _candidato(2, 2)]
    assert verificar_associacao(1, candidatos) == verificar_associacao(1, candidatos)


def test_violacao_vazia_nao_existe():
    with pytest.raises(ValueError):
        ViolacaoLocalidade(localidade_servico_id=1, sem_localidade=(), localidade_divergente=())


def test_verificar_existencia_lista_ids_ausentes():
    erro = verificar_existencia([1, 99, 98, 99], [_usuario(1, PerfilUsuario.AGENCY)])
    assert isinstance(erro, ErroDeValidacao)
    assert str(erro) == "Usuarios nao encontrados: 99, 98"


def test_verificar_perfis_rejeita_cliente():
    erro = verificar_perfis([_usuario(1, PerfilUsuario.AGENCY), _usuario(5, PerfilUsuario.CUSTOMER)])
    assert erro is not None
    assert erro.mensagem.endswith(": Usuario 5")


@pytest.mark.parametrize("perfil", [PerfilUsuario.ADMIN, PerfilUsuario.AGENCY, PerfilUsuario.SUPPLIER])
def test_verificar_perfis_aceita_associaveis(perfil):
    assert verificar_perfis([_usuario(1, perfil)]) is None


def test_validar_equipe_ok():
    usuarios = [_usuario(1, PerfilUsuario.ADMIN), _usuario(2, PerfilUsuario.SUPPLIER)]
    assert validar_equipe(1, [1, 2], usuarios) is None


def test_validar_equipe_existencia_antes_de_perfil():
    usuarios = [_usuario(5, PerfilUsuario.CUSTOMER)]
    erro = validar_equipe(1, [5, 42], usuarios)
    assert isinstance(erro, ErroDeValidacao)
    assert "42" in erro.mensagem


def test_validar_equipe_perfil_antes_de_localidade():
    usuarios = [_usuario(5, PerfilUsuario.CUSTOMER, localidade_id=None)]
    erro = validar_equipe(1, [5], usuarios)
    assert isinstance(erro, ErroDeValidacao)


def test_validar_equipe_admin_tambem_obedece_localidade():
    usuarios = [_usuario(1, PerfilUsuario.ADMIN, localidade_id=2)]
    violacao = validar_equipe(1, [1], usuarios)
    assert isinstance(violacao, ViolacaoLocalidade)
    assert violacao.ids_localidade_divergente == [1]


def test_validar_equipe_ignora_usuarios_nao_solicitados():
    usuarios = [_usuario(1, PerfilUsuario.AGENCY), _usuario(9, PerfilUsuario.CUSTOMER, localidade_id=7)]
    assert validar_equipe(1, [1], usuarios) is None


def test_auditar_equipe_consistente_sem_achados():
    usuarios = [_usuario(1, PerfilUsuario.AGENCY), _usuario(2, PerfilUsuario.SUPPLIER)]
    assert auditar_equipe(1, [1, 2], usuarios) == []


def test_auditar_equipe_ausente_nao_esconde_localidade():
    usuarios = [_usuario(2, PerfilUsuario.SUPPLIER, localidade_id=5)]
    achados = auditar_equipe(1, [2, 6], usuarios)
    assert len(achados) == 2
    ausentes, violacao = achados
    assert str(ausentes) == "Usuarios nao encontrados: 6"
    assert isinstance(violacao, ViolacaoLocalidade)
    assert violacao.ids_localidade_divergente == [2]


def test_auditar_equipe_reporta_perfil_e_localidade():
    usuarios = [_usuario(5, PerfilUsuario.CUSTOMER, localidade_id=None)]
    achados = auditar_equipe(1, [5], usuarios)
    assert isinstance(achados[0], ErroDeValidacao)
    assert achados[1].ids_sem_localidade == [5]
