# api/domain/cenario/entities.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class ItemCenario:
    """Quantidade (head-count) de um cargo dentro de um cenario. Nunca negativa."""

    cargo_id: str
    quantidade: int

    def __post_init__(self) -> None:
        if self.quantidade < 0:
            raise ValueError("Quantidade de um item de cenario nao pode ser negativa")


@dataclass(frozen=True)
class Cenario:
    id: str
    nome: str
    data_base: date
    criado_em: datetime
    descricao: str | None = None
    ativo: bool = True

    def __post_init__(self) -> None:
        if not self.nome.strip():
            raise ValueError("Cenario exige nome nao-vazio")


def mesclar_itens(*grupos: Iterable[ItemCenario]) -> list[ItemCenario]:
    """Um item por cargo: quantidades do mesmo cargo sao somadas.

    Preserva a ordem da primeira ocorrencia de cada cargo.
    """
    quantidades: dict[str, int] = {}
    for itens in grupos:
        for item in itens:
            quantidades[item.cargo_id] = quantidades.get(item.cargo_id, 0) + item.quantidade
    return [ItemCenario(cargo_id=c, quantidade=q) for c, q in quantidades.items()]
