from decimal import Decimal
from pathlib import Path

import httpx

from api.domain.cargo.enums import OrigemCusto
from api.infrastructure.tabela_referencia import (
    carregar_tabela_referencia,
    parse_brl,
    parse_tabela_referencia,
)

FIXTURE = Path(__file__).parent.parent / "fixtures" / "calculos_referencia.csv"

CSV_MINIMO = (
    'Analista Ministerial,"R$ 5.000,00","R$ 1.400,00","R$ 300,00","R$ 400,00",'
    '"R$ 0,00","R$ 7.100,00","R$ 6.400,00","R$ 6.666,67","R$ 98.266,67"\n'
)


def test_parse_brl():
    assert parse_brl("R$ 1.234,56") == Decimal("1234.56")
    assert parse_brl("R$ 800,00") == Decimal("800.00")
    assert parse_brl("12,5") == Decimal("12.5")


def test_parse_brl_invalido_vale_zero():
    assert parse_brl("") == 0
    assert parse_brl(None) == 0
    assert parse_brl("n/d") == 0
    assert parse_brl("R$ -") == 0


def test_parse_tabela_linha_valida():
    tabela = parse_tabela_referencia(CSV_MINIMO)
    linha = tabela.buscar("Analista Ministerial")
    assert linha is not None
    assert linha.mensal == Decimal("7100.00")
    assert linha.anual == Decimal("98266.67")
    assert linha.como_custo().origem is OrigemCusto.REFERENCIA


def test_parse_tabela_ignora_linhas_curtas_e_sem_rotulo():
    texto = (
        CSV_MINIMO
        + "Linha Curta,1,2,3\n"
        + ',"R$ 1,00",1,1,1,1,1,1,1,1\n'
        + "\n"
    )
    tabela = parse_tabela_referencia(texto)
    assert len(tabela) == 1
    assert tabela.buscar("Linha Curta") is None


def test_parse_tabela_ultima_linha_vence():
    segunda = CSV_MINIMO.replace("R$ 98.266,67", "R$ 1,00")
    tabela = parse_tabela_referencia(CSV_MINIMO + segunda)
    assert len(tabela) == 1
    assert tabela.buscar("Analista Ministerial").anual == Decimal("1.00")


def test_busca_ignora_acentos_e_espacos():
    tabela = parse_tabela_referencia(CSV_MINIMO.replace("Analista Ministerial", "Técnico  Ministerial"))
    assert tabela.buscar("Técnico Ministerial") is not None
    assert tabela.buscar("tecnico ministerial") is not None


def test_carregar_tabela_de_arquivo():
    tabela = carregar_tabela_referencia(str(FIXTURE))
    assert len(tabela) >= 5
    promotor = tabela.buscar("Promotor de Entrância Final")
    assert promotor is not None
    assert promotor.acervo > 0


def test_carregar_tabela_arquivo_inexistente_retorna_vazia(tmp_path):
    tabela = carregar_tabela_referencia(str(tmp_path / "nao_existe.csv"))
    assert len(tabela) == 0


def test_carregar_tabela_sem_origem_retorna_vazia():
    assert len(carregar_tabela_referencia("")) == 0


def test_carregar_tabela_por_url():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/calculos.csv"
        return httpx.Response(200, text=CSV_MINIMO)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    tabela = carregar_tabela_referencia("https://planilhas.example/calculos.csv", client=client)
    assert tabela.buscar("Analista Ministerial") is not None


def test_carregar_tabela_url_com_erro_retorna_vazia():
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(500)))
    tabela = carregar_tabela_referencia("https://planilhas.example/calculos.csv", client=client)
    assert len(tabela) == 0


def test_carregar_tabela_url_inacessivel_retorna_vazia():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("sem rede", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    tabela = carregar_tabela_referencia("https://planilhas.example/calculos.csv", client=client)
    assert len(tabela) == 0
