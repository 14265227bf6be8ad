# api/application/dtos/cenario_dto.py
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from api.domain.cargo.value_objects import arredondar
from api.domain.cenario.entities import Cenario, ItemCenario

from ..services.agregacao import Comparacao, ResumoCenario


class ItemRequestDTO(BaseModel):
    cargo_id: str = Field(min_length=1)
    quantidade: int = Field(ge=0)

    def to_domain(self) -> ItemCenario:
        return ItemCenario(cargo_id=self.cargo_id, quantidade=self.quantidade)


class ItensRequestDTO(BaseModel):
    itens: list[ItemRequestDTO]

    def to_domain(self) -> list[ItemCenario]:
        return [i.to_domain() for i in self.itens]


class CenarioCreateDTO(BaseModel):
    nome: str = Field(min_length=1)
    descricao: str | None = None
    data_base: date = Field(default_factory=date.today)
    itens: list[ItemRequestDTO] = Field(default_factory=list)


class CenarioDTO(BaseModel):
    id: str
    nome: str
    descricao: str | None
    data_base: str
    ativo: bool
    criado_em: str

    @classmethod
    def from_domain(cls, cenario: Cenario) -> CenarioDTO:
        return cls(
            id=cenario.id,
            nome=cenario.nome,
            descricao=cenario.descricao,
            data_base=cenario.data_base.isoformat(),
            ativo=cenario.ativo,
            criado_em=cenario.criado_em.isoformat(),
        )


class LinhaCenarioDTO(BaseModel):
    cargo_id: str
    cargo_nome: str
    grupo: str
    classe: str
    rotulo: str
    quantidade: int
    origem: str
    mensal_unitario: str
    anual_unitario: str
    mensal_total: str
    anual_total: str


class ResumoCenarioDTO(BaseModel):
    total_mensal: str
    total_anual: str
    linhas: list[LinhaCenarioDTO]

    @classmethod
    def from_domain(cls, resumo: ResumoCenario) -> ResumoCenarioDTO:
        return cls(
            total_mensal=str(arredondar(resumo.total_mensal)),
            total_anual=str(arredondar(resumo.total_anual)),
            linhas=[
                LinhaCenarioDTO(
                    cargo_id=linha.cargo.id,
                    cargo_nome=linha.cargo.nome,
                    grupo=linha.cargo.grupo.value,
                    classe=linha.cargo.classe,
                    rotulo=linha.rotulo,
                    quantidade=linha.quantidade,
                    origem=linha.custo_unitario.origem.value,
                    mensal_unitario=str(arredondar(linha.custo_unitario.mensal)),
                    anual_unitario=str(arredondar(linha.custo_unitario.anual)),
                    mensal_total=str(arredondar(linha.mensal_total)),
                    anual_total=str(arredondar(linha.anual_total)),
                )
                for linha in resumo.linhas
            ],
        )


class CenarioDetalheDTO(BaseModel):
    cenario: CenarioDTO
    resumo: ResumoCenarioDTO


class ComparacaoDTO(BaseModel):
    """delta = cenario_b - cenario_a."""

    cenario_a: ResumoCenarioDTO
    cenario_b: ResumoCenarioDTO
    delta_mensal: str
    delta_anual: str

    @classmethod
    def from_domain(cls, comparacao: Comparacao) -> ComparacaoDTO:
        return cls(
            cenario_a=ResumoCenarioDTO.from_domain(comparacao.resumo_a),
            cenario_b=ResumoCenarioDTO.from_domain(comparacao.resumo_b),
            delta_mensal=str(arredondar(comparacao.delta_mensal)),
            delta_anual=str(arredondar(comparacao.delta_anual)),
        )
