# api/application/services/export_service.py
from __future__ import annotations

import polars as pl

from ..dtos.relatorio_dto import LinhaRelatorioDTO, RelatorioCenariosDTO

# Cabecalho do relatorio: (coluna no CSV, campo do DTO, tipo).
# Texto sai entre aspas, dinheiro com 2 casas, quantidade inteira.
_COLUNAS: tuple[tuple[str, str, type[pl.DataType]], ...] = (
    ("Cenario", "cenario", pl.Utf8),
    ("Cenario_ID", "cenario_id", pl.Utf8),
    ("Data_Base", "data_base", pl.Utf8),
    ("Cargo_ID", "cargo_id", pl.Utf8),
    ("Cargo_Nome", "cargo_nome", pl.Utf8),
    ("Grupo", "grupo", pl.Utf8),
    ("Classe", "classe", pl.Utf8),
    ("Label_CSV", "rotulo", pl.Utf8),
    ("Quantidade", "quantidade", pl.Int64),
    ("Base", "base", pl.Float64),
    ("Contrib", "contribuicao", pl.Float64),
    ("Aux", "auxilio", pl.Float64),
    ("Alimentacao", "alimentacao", pl.Float64),
    ("Acervo", "acervo", pl.Float64),
    ("Mensal_Unit", "mensal_unitario", pl.Float64),
    ("Decimo", "decimo_terceiro", pl.Float64),
    ("Ferias", "ferias", pl.Float64),
    ("Anual_Unit", "anual_unitario", pl.Float64),
    ("Mensal_Total", "mensal_total", pl.Float64),
    ("Anual_Total", "anual_total", pl.Float64),
)


class ExportService:
    def exportar_json(self, relatorio: RelatorioCenariosDTO) -> str:
        return relatorio.model_dump_json(indent=2)

    def exportar_csv(self, relatorio: RelatorioCenariosDTO) -> str:
        df = self.para_dataframe(relatorio.linhas)
        return df.write_csv(quote_style="non_numeric", float_precision=2)

    def para_dataframe(self, linhas: list[LinhaRelatorioDTO]) -> pl.DataFrame:
        """Valores ja arredondados no DTO; float aqui e so formato de saida."""
        dados: dict[str, list[object]] = {coluna: [] for coluna, _, _ in _COLUNAS}
        for linha in linhas:
            valores = linha.model_dump()
            for coluna, campo, tipo in _COLUNAS:
                valor = valores[campo]
                dados[coluna].append(float(valor) if tipo is pl.Float64 else valor)
        return pl.DataFrame(dados, schema={coluna: tipo for coluna, _, tipo in _COLUNAS})
