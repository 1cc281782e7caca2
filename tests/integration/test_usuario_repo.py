# tests/integration/test_usuario_repo.py
import duckdb

from api.domain.documento.value_objects import CNPJ, CPF
from api.infrastructure.repositories.duckdb_usuario_repo import DuckDBUsuarioRepo


def test_hidrata_documento_valido(test_db: duckdb.DuckDBPyConnection) -> None:
    usuarios = DuckDBUsuarioRepo(test_db.cursor()).buscar_ativos_por_ids([1, 2])
    assert isinstance(usuarios[0].documento, CPF)
    assert isinstance(usuarios[1].documento, CNPJ)


def test_documento_recusado_vira_none(test_db: duckdb.DuckDBPyConnection) -> None:
    (usuario,) = DuckDBUsuarioRepo(test_db.cursor()).buscar_ativos_por_ids([8])
    assert usuario.nome == "Agencia Legado"
    assert usuario.localidade_id == 1
    assert usuario.documento is None


def test_removido_nao_retorna(test_db: duckdb.DuckDBPyConnection) -> None:
    usuarios = DuckDBUsuarioRepo(test_db.cursor()).buscar_ativos_por_ids([6, 7])
    assert [u.id for u in usuarios] == [7]
