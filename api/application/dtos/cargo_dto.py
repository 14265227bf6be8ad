# api/application/dtos/cargo_dto.py
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from api.domain.cargo.entities import ParametrosCargo
from api.domain.cargo.enums import GrupoCargo
from api.domain.cargo.value_objects import CustoCargo, arredondar

from ..services.cargo_service import CargoComCusto


def _opcional(valor: Decimal | None) -> str | None:
    return str(valor) if valor is not None else None


class CustoDTO(BaseModel):
    """Valores monetarios serializados como string, 2 casas."""

    base: str
    contribuicao: str
    auxilio: str
    alimentacao: str
    acervo: str
    mensal: str
    decimo_terceiro: str
    ferias: str
    anual: str
    origem: str

    @classmethod
    def from_domain(cls, custo: CustoCargo) -> CustoDTO:
        return cls(
            base=str(arredondar(custo.base)),
            contribuicao=str(arredondar(custo.contribuicao)),
            auxilio=str(arredondar(custo.auxilio)),
            alimentacao=str(arredondar(custo.alimentacao)),
            acervo=str(arredondar(custo.acervo)),
            mensal=str(arredondar(custo.mensal)),
            decimo_terceiro=str(arredondar(custo.decimo_terceiro)),
            ferias=str(arredondar(custo.ferias)),
            anual=str(arredondar(custo.anual)),
            origem=custo.origem.value,
        )


class ParametrosDTO(BaseModel):
    base_mensal: str
    aliquota_patronal: str
    auxilio_saude: str | None
    auxilio_alimentacao: str | None
    auxilio_transporte: str | None
    aplica_acervo: bool


class CargoDTO(BaseModel):
    id: str
    grupo: str
    classe: str
    nome: str
    ativo: bool
    rotulo: str
    parametros: ParametrosDTO
    custo: CustoDTO
    custo_calculado: CustoDTO

    @classmethod
    def from_domain(cls, item: CargoComCusto) -> CargoDTO:
        p = item.parametros
        return cls(
            id=item.cargo.id,
            grupo=item.cargo.grupo.value,
            classe=item.cargo.classe,
            nome=item.cargo.nome,
            ativo=item.cargo.ativo,
            rotulo=item.rotulo,
            parametros=ParametrosDTO(
                base_mensal=str(p.base_mensal),
                aliquota_patronal=str(p.aliquota_patronal),
                auxilio_saude=_opcional(p.auxilio_saude),
                auxilio_alimentacao=_opcional(p.auxilio_alimentacao),
                auxilio_transporte=_opcional(p.auxilio_transporte),
                aplica_acervo=p.aplica_acervo,
            ),
            custo=CustoDTO.from_domain(item.custo),
            custo_calculado=CustoDTO.from_domain(item.custo_calculado),
        )


class ParametrosRequestDTO(BaseModel):
    """Mesma precisao das colunas: dinheiro DECIMAL(14,2), aliquota DECIMAL(8,4)."""

    base_mensal: Decimal = Field(ge=0, max_digits=14, decimal_places=2)
    aliquota_patronal: Decimal = Field(default=Decimal("0"), ge=0, le=1, decimal_places=4)
    auxilio_saude: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    auxilio_alimentacao: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    auxilio_transporte: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    aplica_acervo: bool = False

    def to_domain(self, cargo_id: str) -> ParametrosCargo:
        return ParametrosCargo(
            cargo_id=cargo_id,
            base_mensal=self.base_mensal,
            aliquota_patronal=self.aliquota_patronal,
            auxilio_saude=self.auxilio_saude,
            auxilio_alimentacao=self.auxilio_alimentacao,
            auxilio_transporte=self.auxilio_transporte,
            aplica_acervo=self.aplica_acervo,
        )


class CargoCreateDTO(BaseModel):
    grupo: GrupoCargo
    classe: str = ""
    nome: str = Field(min_length=1)
    parametros: ParametrosRequestDTO


class AtivoRequestDTO(BaseModel):
    ativo: bool
