# api/domain/cenario/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Cenario, ItemCenario


class CenarioRepository(Protocol):
    """Falhas do armazenamento sobem como api.domain.erros.ErroArmazenamento."""

    def listar(self) -> list[Cenario]: ...
    def buscar_por_id(self, cenario_id: str) -> Cenario | None: ...
    def inserir(self, cenario: Cenario) -> None: ...
    def remover(self, cenario_id: str) -> None: ...
    def listar_itens(self, cenario_id: str) -> list[ItemCenario]: ...
    def substituir_itens(self, cenario_id: str, itens: list[ItemCenario]) -> None: ...
