# api/infrastructure/repositories/duckdb_cargo_repo.py
from __future__ import annotations

from decimal import Decimal

import duckdb

from api.domain.cargo.entities import Cargo, ParametrosCargo
from api.domain.cargo.enums import GrupoCargo

from ._base import operacao, transacao

_COLUNAS_PARAMETROS = """
    cargo_id, base_mensal, aliquota_patronal, auxilio_saude,
    auxilio_alimentacao, auxilio_transporte, aplica_acervo
"""


class DuckDBCargoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self, grupo: GrupoCargo | None = None, apenas_ativos: bool = True) -> list[Cargo]:
        """Ordenado por grupo e classe. Prepared statements."""
        conditions: list[str] = []
        params: list[object] = []

        if grupo is not None:
            conditions.append("grupo = ?")
            params.append(grupo.value)
        if apenas_ativos:
            conditions.append("ativo")

        where = ""
        if conditions:
            where = "WHERE " + " AND ".join(conditions)

        with operacao("listar_cargos"):
            rows = self._conn.execute(f"""
                SELECT id, grupo, classe, nome, ativo
                FROM cargo
                {where}
                ORDER BY grupo, classe, nome
            """, params).fetchall()  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def buscar_por_id(self, cargo_id: str) -> Cargo | None:
        with operacao("buscar_cargo"):
            row = self._conn.execute(
                "SELECT id, grupo, classe, nome, ativo FROM cargo WHERE id = ?",
                [cargo_id],
            ).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def buscar_parametros(self, cargo_id: str) -> ParametrosCargo | None:
        with operacao("buscar_parametros"):
            row = self._conn.execute(
                f"SELECT {_COLUNAS_PARAMETROS} FROM parametros_cargo WHERE cargo_id = ?",  # noqa: S608
                [cargo_id],
            ).fetchone()
        if row is None:
            return None
        return self._hidratar_parametros(row)

    def parametros_por_cargo(self) -> dict[str, ParametrosCargo]:
        with operacao("listar_parametros"):
            rows = self._conn.execute(
                f"SELECT {_COLUNAS_PARAMETROS} FROM parametros_cargo"  # noqa: S608
            ).fetchall()
        return {str(r[0]): self._hidratar_parametros(r) for r in rows}

    def inserir(self, cargo: Cargo, parametros: ParametrosCargo) -> None:
        """Cargo e parametros nascem juntos (1:1): ou os dois sao gravados ou nenhum."""
        with transacao(self._conn, "criar_cargo"):
            with operacao("inserir_cargo"):
                self._conn.execute(
                    "INSERT INTO cargo VALUES (?, ?, ?, ?, ?)",
                    [cargo.id, cargo.grupo.value, cargo.classe, cargo.nome, cargo.ativo],
                )
            with operacao("inserir_parametros"):
                self._conn.execute(
                    "INSERT INTO parametros_cargo VALUES (?, ?, ?, ?, ?, ?, ?)",
                    self._valores_parametros(parametros),
                )

    def atualizar_parametros(self, parametros: ParametrosCargo) -> None:
        """Upsert: cria a linha se o cargo ainda nao tinha parametros."""
        with operacao("atualizar_parametros"):
            self._conn.execute(
                "INSERT OR REPLACE INTO parametros_cargo VALUES (?, ?, ?, ?, ?, ?, ?)",
                self._valores_parametros(parametros),
            )

    def definir_ativo(self, cargo_id: str, ativo: bool) -> None:
        with operacao("definir_ativo"):
            self._conn.execute("UPDATE cargo SET ativo = ? WHERE id = ?", [ativo, cargo_id])

    @staticmethod
    def _valores_parametros(p: ParametrosCargo) -> list[object]:
        return [
            p.cargo_id,
            p.base_mensal,
            p.aliquota_patronal,
            p.auxilio_saude,
            p.auxilio_alimentacao,
            p.auxilio_transporte,
            p.aplica_acervo,
        ]

    def _hidratar(self, row: tuple) -> Cargo:  # type: ignore[type-arg]
        return Cargo(
            id=str(row[0]),
            grupo=GrupoCargo(str(row[1])),
            classe=str(row[2] or ""),
            nome=str(row[3]),
            ativo=bool(row[4]),
        )

    def _hidratar_parametros(self, row: tuple) -> ParametrosCargo:  # type: ignore[type-arg]
        """Colunas: cargo_id(0), base_mensal(1), aliquota_patronal(2),
        auxilio_saude(3), auxilio_alimentacao(4), auxilio_transporte(5),
        aplica_acervo(6)"""
        return ParametrosCargo(
            cargo_id=str(row[0]),
            base_mensal=Decimal(str(row[1])) if row[1] is not None else Decimal("0"),
            aliquota_patronal=Decimal(str(row[2])) if row[2] is not None else Decimal("0"),
            auxilio_saude=Decimal(str(row[3])) if row[3] is not None else None,
            auxilio_alimentacao=Decimal(str(row[4])) if row[4] is not None else None,
            auxilio_transporte=Decimal(str(row[5])) if row[5] is not None else None,
            aplica_acervo=bool(row[6]),
        )
