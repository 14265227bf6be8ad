# api/infrastructure/pdf_generator.py
from __future__ import annotations

from html import escape
from itertools import groupby
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.application.dtos.relatorio_dto import RelatorioCenariosDTO


def gerar_pdf_relatorio(relatorio: RelatorioCenariosDTO) -> bytes:
    """Generate a PDF report with one table per scenario.

    Raises RuntimeError if weasyprint or its system libraries are missing.
    """
    try:
        from weasyprint import HTML  # type: ignore[import-untyped,import-not-found]
    except (ImportError, OSError) as err:
        msg = "PDF export requires weasyprint. Install with: pip install simulador-pessoal[pdf]"
        raise RuntimeError(msg) from err

    html = _build_html(relatorio)
    return HTML(string=html).write_pdf()  # type: ignore[no-any-return]


def _build_html(relatorio: RelatorioCenariosDTO) -> str:
    sections: list[str] = []

    sections.append(f"""
    <h1>Relatorio de Cenarios</h1>
    <p class="meta">Gerado em {escape(relatorio.gerado_em)}</p>
    """)

    if not relatorio.linhas:
        sections.append("<p>Nenhum cenario com cargos cadastrados.</p>")

    totais = {t.cenario_id: t for t in relatorio.totais}

    for (cenario_id, nome, data_base), grupo in groupby(
        relatorio.linhas, key=lambda li: (li.cenario_id, li.cenario, li.data_base)
    ):
        linhas = list(grupo)
        total = totais[cenario_id]
        cargo_rows = "".join(
            f"<tr><td>{escape(li.cargo_nome)}</td><td>{escape(li.grupo)}</td>"
            f"<td>{escape(li.rotulo)}</td><td class=\"num\">{li.quantidade}</td>"
            f"<td class=\"num\">R$ {li.mensal_unitario}</td><td class=\"num\">R$ {li.anual_unitario}</td>"
            f"<td class=\"num\">R$ {li.mensal_total}</td><td class=\"num\">R$ {li.anual_total}</td></tr>"
            for li in linhas
        )
        sections.append(f"""
        <h2>{escape(nome)}</h2>
        <p class="meta">ID {escape(cenario_id)} &mdash; data base {escape(data_base)}</p>
        <table>
            <tr><th>Cargo</th><th>Grupo</th><th>Rotulo</th><th>Qtd</th>
                <th>Mensal Unit.</th><th>Anual Unit.</th><th>Mensal Total</th><th>Anual Total</th></tr>
            {cargo_rows}
            <tr class="total"><td colspan="6">TOTAL</td>
                <td class="num">R$ {total.total_mensal}</td><td class="num">R$ {total.total_anual}</td></tr>
        </table>
        """)

    body = "\n".join(sections)

    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>Relatorio de Cenarios</title>
<style>
    body {{ font-family: Arial, sans-serif; margin: 40px; font-size: 11px; color: #333; }}
    h1 {{ font-size: 18px; border-bottom: 2px solid #333; padding-bottom: 8px; }}
    h2 {{ font-size: 14px; margin-top: 24px; color: #555; }}
    table {{ width: 100%; border-collapse: collapse; margin-top: 8px; }}
    th, td {{ border: 1px solid #ddd; padding: 6px 8px; text-align: left; }}
    th {{ background-color: #f5f5f5; font-weight: bold; }}
    .num {{ text-align: right; }}
    .total td {{ font-weight: bold; background-color: #f9f9f9; }}
    .meta {{ font-size: 10px; color: #888; }}
</style>
</head>
<body>
{body}
</body>
</html>"""
