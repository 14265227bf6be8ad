from decimal import Decimal

from api.application.services.agregacao import agregar_cenario, comparar
from api.application.services.resolvedor_custo import ResolvedorCusto
from api.domain.cargo.entities import Cargo, ParametrosCargo
from api.domain.cargo.enums import GrupoCargo, OrigemCusto
from api.domain.cargo.referencia import LinhaReferencia, TabelaReferencia
from api.domain.cenario.entities import ItemCenario

CARGOS = {
    "analista": Cargo(id="analista", grupo=GrupoCargo.EFETIVO, classe="A", nome="Analista Ministerial"),
    "estagio": Cargo(id="estagio", grupo=GrupoCargo.ESTAGIARIO, classe="", nome="Estagiário"),
    "inativo": Cargo(id="inativo", grupo=GrupoCargo.EFETIVO, classe="", nome="Motorista", ativo=False),
}

PARAMETROS = {
    "analista": ParametrosCargo(
        cargo_id="analista",
        base_mensal=Decimal("6000"),
        aliquota_patronal=Decimal("0.28"),
        auxilio_saude=Decimal("300"),
        auxilio_alimentacao=Decimal("400"),
    ),
    "estagio": ParametrosCargo(cargo_id="estagio", base_mensal=Decimal("800")),
    "inativo": ParametrosCargo(cargo_id="inativo", base_mensal=Decimal("2000")),
}


def _resumo(itens, resolvedor=None):
    return agregar_cenario(itens, CARGOS, PARAMETROS, resolvedor or ResolvedorCusto())


def _linha_ref(rotulo: str, mensal: str, anual: str) -> LinhaReferencia:
    zero = Decimal("0")
    return LinhaReferencia(
        rotulo=rotulo,
        base=zero,
        contribuicao=zero,
        auxilio=zero,
        alimentacao=zero,
        acervo=zero,
        mensal=Decimal(mensal),
        decimo_terceiro=zero,
        ferias=zero,
        anual=Decimal(anual),
    )


def test_total_e_quantidade_vezes_unitario():
    resumo = _resumo([ItemCenario("estagio", 10)])
    assert resumo.total_mensal == Decimal("9760.00")
    assert resumo.total_anual == Decimal("117120.00")


def test_cenario_vazio_soma_zero():
    resumo = _resumo([])
    assert resumo.total_mensal == 0
    assert resumo.total_anual == 0


def test_linearidade_na_quantidade():
    um = _resumo([ItemCenario("analista", 1)])
    sete = _resumo([ItemCenario("analista", 7)])
    assert sete.total_anual == um.total_anual * 7
    assert sete.total_mensal == um.total_mensal * 7


def test_total_e_soma_das_linhas():
    resumo = _resumo([ItemCenario("analista", 2), ItemCenario("estagio", 3)])
    assert resumo.total_anual == sum(li.anual_total for li in resumo.linhas)


def test_cargo_orfao_e_ignorado():
    resumo = _resumo([ItemCenario("removido", 5), ItemCenario("estagio", 1)])
    assert [li.cargo.id for li in resumo.linhas] == ["estagio"]


def test_cargo_inativo_e_ignorado():
    resumo = _resumo([ItemCenario("inativo", 5)])
    assert resumo.linhas == ()
    assert resumo.total_anual == 0


def test_quantidade_zero_gera_linha_sem_custo():
    resumo = _resumo([ItemCenario("analista", 0)])
    assert len(resumo.linhas) == 1
    assert resumo.total_anual == 0


def test_tabela_de_referencia_substitui_motor():
    tabela = TabelaReferencia.de_linhas([_linha_ref("Analista Ministerial", "10000", "150000")])
    resumo = _resumo([ItemCenario("analista", 2)], ResolvedorCusto(tabela=tabela))
    linha = resumo.linhas[0]
    assert linha.custo_unitario.origem is OrigemCusto.REFERENCIA
    assert linha.custo_unitario.mensal == Decimal("10000")
    assert resumo.total_anual == Decimal("300000")


def test_rotulo_fora_da_tabela_usa_motor():
    tabela = TabelaReferencia.de_linhas([_linha_ref("Técnico Ministerial", "1", "1")])
    resumo = _resumo([ItemCenario("analista", 1)], ResolvedorCusto(tabela=tabela))
    assert resumo.linhas[0].custo_unitario.origem is OrigemCusto.CALCULADO


def test_comparacao_delta_b_menos_a():
    a = _resumo([ItemCenario("estagio", 10)])
    b = _resumo([ItemCenario("estagio", 12)])
    comparacao = comparar(a, b)
    assert comparacao.delta_anual == Decimal("23424.00")
    assert comparacao.delta_mensal == Decimal("1952.00")


def test_comparacao_antissimetrica():
    a = _resumo([ItemCenario("analista", 3)])
    b = _resumo([ItemCenario("estagio", 10), ItemCenario("analista", 1)])
    assert comparar(a, b).delta_anual == -comparar(b, a).delta_anual
    assert comparar(a, b).delta_mensal == -comparar(b, a).delta_mensal


def test_comparacao_identidade():
    a = _resumo([ItemCenario("analista", 3)])
    assert comparar(a, a).delta_anual == 0
