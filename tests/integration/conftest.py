# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import duckdb
import pytest
from fastapi.testclient import TestClient

SCHEMA_PATH = Path(__file__).parent.parent.parent / "seed" / "output" / "schema.sql"

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture(scope="session")
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Cria DuckDB in-memory com schema e dados deterministicos."""
    conn = duckdb.connect(":memory:")
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))

    # --- Localidades ---
    conn.execute("""
        INSERT INTO dim_localidade VALUES
        (1, 'Sao Paulo', 'SP'),
        (2, 'Rio de Janeiro', 'RJ')
    """)

    # --- Usuarios ---
    # 4 sem localidade, 5 cliente, 6 removido, 7 em SP mas escalado num servico do RJ,
    # 8 com documento legado que os value objects recusam
    conn.execute("""
        INSERT INTO dim_usuario VALUES
        (1, 'Ana Admin', 'admin1@seed.local', 'ADMIN', 1, '11144477735', 'CPF', TRUE, NULL),
        (2, 'Agencia Sol', 'agency2@seed.local', 'AGENCY', 1, '11222333000181', 'CNPJ', TRUE, NULL),
        (3, 'Transfer Rio', 'supplier3@seed.local', 'SUPPLIER', 2, '33000167000101', 'CNPJ', TRUE, NULL),
        (4, 'Fornecedor Sem Local', 'supplier4@seed.local', 'SUPPLIER', NULL, NULL, NULL, TRUE, NULL),
        (5, 'Cliente Carlos', 'customer5@seed.local', 'CUSTOMER', 1, '52998224725', 'CPF', TRUE, NULL),
        (6, 'Fornecedor Removido', 'supplier6@seed.local', 'SUPPLIER', 1, NULL, NULL, TRUE,
         TIMESTAMP '2025-01-01 00:00:00'),
        (7, 'Guia Paulista', 'supplier7@seed.local', 'SUPPLIER', 1, NULL, NULL, TRUE, NULL),
        (8, 'Agencia Legado', 'agency8@seed.local', 'AGENCY', 1, '00000000000', 'CPF', TRUE, NULL)
    """)

    # --- Servicos ---
    conn.execute("""
        INSERT INTO dim_servico VALUES
        (1, 'City tour Sao Paulo', NULL, 1, TRUE, NULL),
        (2, 'Transfer Galeao', NULL, 2, TRUE, NULL),
        (3, 'Passeio Pao de Acucar', NULL, 2, TRUE, NULL),
        (4, 'Trilha Cantareira', NULL, 1, TRUE, NULL)
    """)

    # --- Bridge Servico-Usuario ---
    # Servicos 3 e 4 tem equipe fora da regra: a auditoria deve acusar.
    # No 4 o usuario 6 foi removido depois da gravacao.
    conn.execute("""
        INSERT INTO bridge_servico_usuario VALUES
        (1, 1), (1, 2),
        (2, 3),
        (3, 7),
        (4, 3), (4, 6)
    """)

    # --- Pagamentos ---
    conn.execute("""
        INSERT INTO fato_pagamento VALUES
        (1, 1000, 'PAID', 'Reserva 1', 'pix', 2,
         TIMESTAMP '2025-05-10 12:00:00', TIMESTAMP '2025-05-10 12:05:00'),
        (2, 500, 'PENDING', 'Reserva 2', 'boleto', 5,
         TIMESTAMP '2025-05-20 09:00:00', NULL),
        (3, 2000, 'CANCELLED', 'Reserva 3', NULL, NULL,
         TIMESTAMP '2025-06-01 00:30:00', NULL),
        (4, 1500, 'PAID', 'Reserva 4', 'cartao', 5,
         TIMESTAMP '2025-06-15 18:00:00', TIMESTAMP '2025-06-15 18:01:00')
    """)

    yield conn
    conn.close()


@pytest.fixture(scope="session")
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from api.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
