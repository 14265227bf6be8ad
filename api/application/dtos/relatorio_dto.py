# api/application/dtos/relatorio_dto.py
from __future__ import annotations

from pydantic import BaseModel

from api.domain.cargo.value_objects import arredondar
from api.domain.cenario.entities import Cenario

from ..services.agregacao import ResumoCenario


class LinhaRelatorioDTO(BaseModel):
    """Uma linha por par (cenario, cargo). Valores com 2 casas, como string."""

    cenario: str
    cenario_id: str
    data_base: str
    cargo_id: str
    cargo_nome: str
    grupo: str
    classe: str
    rotulo: str
    quantidade: int
    base: str
    contribuicao: str
    auxilio: str
    alimentacao: str
    acervo: str
    mensal_unitario: str
    decimo_terceiro: str
    ferias: str
    anual_unitario: str
    mensal_total: str
    anual_total: str


class TotalCenarioDTO(BaseModel):
    """Totais do cenario somados sem arredondamento e arredondados uma vez."""

    cenario_id: str
    total_mensal: str
    total_anual: str


class RelatorioCenariosDTO(BaseModel):
    gerado_em: str
    linhas: list[LinhaRelatorioDTO]
    totais: list[TotalCenarioDTO]

    @classmethod
    def from_domain(
        cls,
        relatorio: list[tuple[Cenario, ResumoCenario]],
        gerado_em: str,
    ) -> RelatorioCenariosDTO:
        linhas: list[LinhaRelatorioDTO] = []
        totais: list[TotalCenarioDTO] = []
        for cenario, resumo in relatorio:
            totais.append(
                TotalCenarioDTO(
                    cenario_id=cenario.id,
                    total_mensal=str(arredondar(resumo.total_mensal)),
                    total_anual=str(arredondar(resumo.total_anual)),
                )
            )
            for linha in resumo.linhas:
                custo = linha.custo_unitario
                linhas.append(
                    LinhaRelatorioDTO(
                        cenario=cenario.nome,
                        cenario_id=cenario.id,
                        data_base=cenario.data_base.isoformat(),
                        cargo_id=linha.cargo.id,
                        cargo_nome=linha.cargo.nome,
                        grupo=linha.cargo.grupo.value,
                        classe=linha.cargo.classe,
                        rotulo=linha.rotulo,
                        quantidade=linha.quantidade,
                        base=str(arredondar(custo.base)),
                        contribuicao=str(arredondar(custo.contribuicao)),
                        auxilio=str(arredondar(custo.auxilio)),
                        alimentacao=str(arredondar(custo.alimentacao)),
                        acervo=str(arredondar(custo.acervo)),
                        mensal_unitario=str(arredondar(custo.mensal)),
                        decimo_terceiro=str(arredondar(custo.decimo_terceiro)),
                        ferias=str(arredondar(custo.ferias)),
                        anual_unitario=str(arredondar(custo.anual)),
                        mensal_total=str(arredondar(linha.mensal_total)),
                        anual_total=str(arredondar(linha.anual_total)),
                    )
                )
        return cls(gerado_em=gerado_em, linhas=linhas, totais=totais)
