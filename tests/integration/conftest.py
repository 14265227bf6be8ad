# tests/integration/conftest.py
from __future__ import annotations

from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

from api.domain.cargo.referencia import TabelaReferencia
from api.infrastructure.duckdb_connection import aplicar_schema


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com schema e um cargo de cada grupo. Novo a cada teste."""
    conn = duckdb.connect(":memory:")
    aplicar_schema(conn)

    conn.execute("""
        INSERT INTO cargo VALUES
        ('c-analista', 'EFETIVO', 'A', 'Analista Ministerial - Direito', TRUE),
        ('c-tecnico', 'EFETIVO', 'A', 'Técnico Ministerial', TRUE),
        ('c-promotor', 'MEMBRO', 'Entrância Final', 'Promotor de Justiça', TRUE),
        ('c-cc05', 'COMISSIONADO', '', 'CC-05 Assessor', TRUE),
        ('c-estagio', 'ESTAGIARIO', 'Graduação', 'Estagiário de Direito', TRUE),
        ('c-inativo', 'EFETIVO', 'B', 'Analista Ministerial - TI', FALSE)
    """)

    conn.execute("""
        INSERT INTO parametros_cargo VALUES
        ('c-analista', 5000.00, 0.28, 300.00, 400.00, NULL, FALSE),
        ('c-tecnico', 3000.00, 0.28, 300.00, 400.00, NULL, FALSE),
        ('c-promotor', 30000.00, 0.28, 1000.00, 1500.00, NULL, TRUE),
        ('c-cc05', 6000.00, 0.28, 0, 400.00, NULL, FALSE),
        ('c-estagio', 800.00, 0, NULL, NULL, NULL, FALSE),
        ('c-inativo', 5000.00, 0.28, 300.00, 400.00, NULL, FALSE)
    """)

    yield conn
    conn.close()


@pytest.fixture()
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory e tabela de referencia vazia."""
    from api.infrastructure import duckdb_connection, tabela_referencia
    duckdb_connection.set_connection(test_db)
    tabela_referencia.set_tabela_referencia(TabelaReferencia())

    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c

    tabela_referencia.set_tabela_referencia(None)
