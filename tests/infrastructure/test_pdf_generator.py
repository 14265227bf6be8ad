from datetime import date, datetime
from decimal import Decimal

from api.application.dtos.relatorio_dto import RelatorioCenariosDTO
from api.application.services.agregacao import LinhaCenario, ResumoCenario
from api.domain.cargo.entities import Cargo
from api.domain.cargo.enums import GrupoCargo
from api.domain.cargo.value_objects import CustoCargo
from api.domain.cenario.entities import Cenario
from api.infrastructure.pdf_generator import _build_html

MEIO_CENTAVO = Decimal("0.005")


def _custo_meio_centavo() -> CustoCargo:
    zero = Decimal("0")
    return CustoCargo(
        base=zero,
        contribuicao=zero,
        auxilio=zero,
        alimentacao=zero,
        acervo=zero,
        mensal=MEIO_CENTAVO,
        decimo_terceiro=zero,
        ferias=zero,
        anual=MEIO_CENTAVO,
    )


def _linha(cargo_id: str) -> LinhaCenario:
    cargo = Cargo(cargo_id, GrupoCargo.EFETIVO, "", f"Cargo {cargo_id}")
    return LinhaCenario(cargo=cargo, rotulo=cargo.nome, quantidade=1, custo_unitario=_custo_meio_centavo())


def _relatorio() -> RelatorioCenariosDTO:
    cenario = Cenario(id="s1", nome="Base 2025", data_base=date(2025, 1, 1), criado_em=datetime(2025, 1, 1))
    resumo = ResumoCenario(linhas=(_linha("a"), _linha("b")))
    return RelatorioCenariosDTO.from_domain([(cenario, resumo)], gerado_em="2025-01-01T00:00:00")


def test_totais_do_cenario_arredondados_sobre_a_soma_exata():
    relatorio = _relatorio()
    # cada linha arredonda para 0.01, mas a soma exata e 0.010
    assert [li.mensal_total for li in relatorio.linhas] == ["0.01", "0.01"]
    assert relatorio.totais[0].total_mensal == "0.01"
    assert relatorio.totais[0].total_anual == "0.01"


def test_html_usa_totais_do_cenario():
    html = _build_html(_relatorio())
    linha_total = html.split(">TOTAL<", 1)[1].split("</tr>", 1)[0]
    assert linha_total.count("R$ 0.01") == 2
    assert "R$ 0.02" not in html


def test_html_sem_linhas():
    relatorio = RelatorioCenariosDTO.from_domain([], gerado_em="2025-01-01T00:00:00")
    assert "Nenhum cenario com cargos cadastrados." in _build_html(relatorio)
