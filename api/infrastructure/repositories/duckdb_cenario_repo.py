# api/infrastructure/repositories/duckdb_cenario_repo.py
#
# Cenarios e seus itens (cenario_cargo).
#
# Design decisions:
#   - substituir_itens is replace-all: DELETE every item of the scenario, then
#     INSERT the new set. The two steps are separate statements with no
#     transaction around them. A failure between them leaves the scenario
#     with zero items; the error is labeled substituir_itens.inserir so the
#     caller knows a retry is needed.
#   - remover deletes the items before the scenario row (items are owned).
from __future__ import annotations

from datetime import date, datetime

import duckdb

from api.domain.cenario.entities import Cenario, ItemCenario

from ._base import operacao


class DuckDBCenarioRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self) -> list[Cenario]:
        """Mais recentes primeiro."""
        with operacao("listar_cenarios"):
            rows = self._conn.execute("""
                SELECT id, nome, descricao, data_base, ativo, criado_em
                FROM cenario
                ORDER BY criado_em DESC
            """).fetchall()
        return [self._hidratar(r) for r in rows]

    def buscar_por_id(self, cenario_id: str) -> Cenario | None:
        with operacao("buscar_cenario"):
            row = self._conn.execute(
                """SELECT id, nome, descricao, data_base, ativo, criado_em
                   FROM cenario WHERE id = ?""",
                [cenario_id],
            ).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def inserir(self, cenario: Cenario) -> None:
        with operacao("inserir_cenario"):
            self._conn.execute(
                "INSERT INTO cenario VALUES (?, ?, ?, ?, ?, ?)",
                [
                    cenario.id,
                    cenario.nome,
                    cenario.descricao,
                    cenario.data_base,
                    cenario.ativo,
                    cenario.criado_em,
                ],
            )

    def remover(self, cenario_id: str) -> None:
        with operacao("remover_cenario.itens"):
            self._conn.execute("DELETE FROM cenario_cargo WHERE cenario_id = ?", [cenario_id])
        with operacao("remover_cenario"):
            self._conn.execute("DELETE FROM cenario WHERE id = ?", [cenario_id])

    def listar_itens(self, cenario_id: str) -> list[ItemCenario]:
        with operacao("listar_itens"):
            rows = self._conn.execute(
                """SELECT cargo_id, quantidade FROM cenario_cargo
                   WHERE cenario_id = ? ORDER BY rowid""",
                [cenario_id],
            ).fetchall()
        return [ItemCenario(cargo_id=str(r[0]), quantidade=int(r[1])) for r in rows]

    def substituir_itens(self, cenario_id: str, itens: list[ItemCenario]) -> None:
        with operacao("substituir_itens.remover"):
            self._conn.execute("DELETE FROM cenario_cargo WHERE cenario_id = ?", [cenario_id])
        if not itens:
            return
        with operacao("substituir_itens.inserir"):
            self._conn.executemany(
                "INSERT INTO cenario_cargo VALUES (?, ?, ?)",
                [[cenario_id, i.cargo_id, i.quantidade] for i in itens],
            )

    def _hidratar(self, row: tuple) -> Cenario:  # type: ignore[type-arg]
        """Colunas: id(0), nome(1), descricao(2), data_base(3), ativo(4), criado_em(5)"""
        data_base = row[3] if isinstance(row[3], date) else date.fromisoformat(str(row[3]))
        criado_em = row[5] if isinstance(row[5], datetime) else datetime.fromisoformat(str(row[5]))
        return Cenario(
            id=str(row[0]),
            nome=str(row[1]),
            descricao=str(row[2]) if row[2] else None,
            data_base=data_base,
            ativo=bool(row[4]),
            criado_em=criado_em,
        )
