# api/infrastructure/tabela_referencia.py
#
# Load and parse the reference table (calculos.csv) that overrides engine
# output for the labels it contains.
#
# Design decisions:
#   - Format: comma-separated, first cell a free-text label, cells 2-10 BRL
#     amounts such as "R$ 1.234,56" (quoted because of the decimal comma).
#     Rows with fewer than 10 cells or an empty label are skipped, not fatal:
#     the table degrades to fewer overrides.
#   - Unparseable amounts become 0, matching how the spreadsheet exports blank
#     cells. Only row shape is validated.
#   - A header row, if present, is not special-cased. Its label ("Cargo") never
#     matches a derived cargo label, so it is harmless.
#   - The origin may be a local path or an http(s) URL fetched with httpx. Any
#     read or fetch failure is logged and yields an empty table, so the API
#     keeps answering with engine-computed costs.
#   - The loaded table is cached process-wide; set_tabela_referencia() lets
#     tests inject their own table, mirroring duckdb_connection.set_connection.
from __future__ import annotations

import csv
import re
from decimal import Decimal, InvalidOperation
from pathlib import Path

import httpx

from api.domain.cargo.referencia import LinhaReferencia, TabelaReferencia

from .config import get_settings
from .log import log

_MIN_CELULAS = 10
_ESPACOS = re.compile(r"\s")

_tabela: TabelaReferencia | None = None


def parse_brl(valor: str | None) -> Decimal:
    """'R$ 1.234,56' -> Decimal('1234.56'). Vazio ou invalido -> 0."""
    if not valor:
        return Decimal("0")
    limpo = _ESPACOS.sub("", valor)
    limpo = limpo.replace("R$", "").replace(".", "").replace(",", ".").replace('"', "").strip()
    try:
        numero = Decimal(limpo)
    except InvalidOperation:
        return Decimal("0")
    if not numero.is_finite():
        return Decimal("0")
    return numero


def parse_tabela_referencia(texto: str) -> TabelaReferencia:
    """Parse the CSV text into a TabelaReferencia. Never raises on bad rows."""
    linhas = [linha for linha in texto.splitlines() if linha.strip()]
    validas: list[LinhaReferencia] = []
    descartadas = 0

    for celulas in csv.reader(linhas):
        celulas = [c.strip() for c in celulas]
        if not celulas or not celulas[0] or len(celulas) < _MIN_CELULAS:
            descartadas += 1
            continue
        validas.append(
            LinhaReferencia(
                rotulo=celulas[0],
                base=parse_brl(celulas[1]),
                contribuicao=parse_brl(celulas[2]),
                auxilio=parse_brl(celulas[3]),
                alimentacao=parse_brl(celulas[4]),
                acervo=parse_brl(celulas[5]),
                mensal=parse_brl(celulas[6]),
                decimo_terceiro=parse_brl(celulas[7]),
                ferias=parse_brl(celulas[8]),
                anual=parse_brl(celulas[9]),
            )
        )

    if descartadas:
        log(f"  Tabela de referencia: {descartadas} linha(s) ignorada(s)")
    return TabelaReferencia.de_linhas(validas)


def carregar_tabela_referencia(
    origem: str,
    *,
    timeout: int = 30,
    client: httpx.Client | None = None,
) -> TabelaReferencia:
    """Read the reference table from a path or URL. Failures yield an empty table."""
    if not origem:
        return TabelaReferencia()

    try:
        if origem.startswith(("http://", "https://")):
            texto = _baixar(origem, timeout, client)
        else:
            texto = Path(origem).read_text(encoding="utf-8-sig")
    except (httpx.HTTPError, OSError) as exc:
        log(f"  Tabela de referencia indisponivel ({origem}): {exc}")
        return TabelaReferencia()

    tabela = parse_tabela_referencia(texto)
    log(f"  Tabela de referencia: {len(tabela)} rotulo(s) carregado(s) de {origem}")
    return tabela


def _baixar(url: str, timeout: int, client: httpx.Client | None) -> str:
    if client is not None:
        response = client.get(url, timeout=timeout, follow_redirects=True)
    else:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
    response.raise_for_status()
    return response.text


def get_tabela_referencia() -> TabelaReferencia:
    global _tabela  # noqa: PLW0603
    if _tabela is None:
        settings = get_settings()
        _tabela = carregar_tabela_referencia(
            settings.tabela_referencia,
            timeout=settings.tabela_referencia_timeout,
        )
    return _tabela


def set_tabela_referencia(tabela: TabelaReferencia | None) -> None:
    """Usado em testes para injetar uma tabela (None forca recarga)."""
    global _tabela  # noqa: PLW0603
    _tabela = tabela
