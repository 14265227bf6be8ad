# api/infrastructure/repositories/duckdb_stats_repo.py
from __future__ import annotations

import duckdb

from api.domain.cargo.enums import GrupoCargo

from ._base import operacao


class DuckDBStatsRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def obter_stats(self) -> dict[str, object]:
        """Contagens de cargo e cenario, com cargos por grupo."""
        return {
            "total_cargos": self._contar("cargo"),
            "total_cenarios": self._contar("cenario"),
            "cargos_por_grupo": self.cargos_por_grupo(),
        }

    def cargos_por_grupo(self) -> dict[GrupoCargo, int]:
        """Todos os grupos presentes, inclusive com zero cargos."""
        with operacao("stats.cargos_por_grupo"):
            rows = self._conn.execute(
                "SELECT grupo, count(*) FROM cargo GROUP BY grupo"
            ).fetchall()
        contagem = {grupo: 0 for grupo in GrupoCargo}
        for grupo, total in rows:
            contagem[GrupoCargo(str(grupo))] = int(total)
        return contagem

    def _contar(self, tabela: str) -> int:
        # Tabela vem de codigo interno, nao de input do usuario
        with operacao(f"stats.contar_{tabela}"):
            row = self._conn.execute(f"SELECT count(*) FROM {tabela}").fetchone()  # noqa: S608
        return int(row[0]) if row else 0
