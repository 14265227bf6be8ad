# api/infrastructure/repositories/_base.py
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import duckdb

from api.domain.erros import ErroArmazenamento
from api.infrastructure.log import log


@contextmanager
def operacao(nome: str) -> Iterator[None]:
    """Converte erros do DuckDB em ErroArmazenamento rotulado com a operacao."""
    try:
        yield
    except duckdb.Error as err:
        log(f"  ERRO armazenamento [{nome}]: {err}")
        raise ErroArmazenamento(nome, str(err)) from err


@contextmanager
def transacao(conn: duckdb.DuckDBPyConnection, nome: str) -> Iterator[None]:
    """Escritas do bloco confirmadas juntas. Qualquer falha desfaz todas."""
    with operacao(nome):
        conn.begin()
        try:
            yield
        except Exception:
            conn.rollback()
            raise
        conn.commit()
