"""Agregacao de custos de um cenario e comparacao entre cenarios. Funcoes puras, zero IO."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from api.domain.cargo.entities import Cargo, ParametrosCargo
from api.domain.cargo.rotulo import derivar_rotulo
from api.domain.cargo.value_objects import CustoCargo
from api.domain.cenario.entities import ItemCenario

from .resolvedor_custo import ResolvedorCusto


@dataclass(frozen=True)
class LinhaCenario:
    cargo: Cargo
    rotulo: str
    quantidade: int
    custo_unitario: CustoCargo

    @property
    def mensal_total(self) -> Decimal:
        return self.custo_unitario.mensal * self.quantidade

    @property
    def anual_total(self) -> Decimal:
        return self.custo_unitario.anual * self.quantidade


@dataclass(frozen=True)
class ResumoCenario:
    linhas: tuple[LinhaCenario, ...] = ()

    @property
    def total_mensal(self) -> Decimal:
        return sum((linha.mensal_total for linha in self.linhas), Decimal("0"))

    @property
    def total_anual(self) -> Decimal:
        return sum((linha.anual_total for linha in self.linhas), Decimal("0"))


@dataclass(frozen=True)
class Comparacao:
    """delta = B - A."""

    resumo_a: ResumoCenario
    resumo_b: ResumoCenario

    @property
    def delta_mensal(self) -> Decimal:
        return self.resumo_b.total_mensal - self.resumo_a.total_mensal

    @property
    def delta_anual(self) -> Decimal:
        return self.resumo_b.total_anual - self.resumo_a.total_anual


def agregar_cenario(
    itens: Iterable[ItemCenario],
    cargos: Mapping[str, Cargo],
    parametros: Mapping[str, ParametrosCargo],
    resolvedor: ResolvedorCusto,
) -> ResumoCenario:
    """Cargo desconhecido (removido depois do item) ou inativo: item ignorado."""
    linhas: list[LinhaCenario] = []
    for item in itens:
        cargo = cargos.get(item.cargo_id)
        if cargo is None or not cargo.ativo:
            continue
        linhas.append(
            LinhaCenario(
                cargo=cargo,
                rotulo=derivar_rotulo(cargo),
                quantidade=item.quantidade,
                custo_unitario=resolvedor.resolver(cargo, parametros.get(cargo.id)),
            )
        )
    return ResumoCenario(linhas=tuple(linhas))


def comparar(resumo_a: ResumoCenario, resumo_b: ResumoCenario) -> Comparacao:
    return Comparacao(resumo_a=resumo_a, resumo_b=resumo_b)
