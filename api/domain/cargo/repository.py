# api/domain/cargo/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Cargo, ParametrosCargo
from .enums import GrupoCargo


class CargoRepository(Protocol):
    """Falhas do armazenamento sobem como api.domain.erros.ErroArmazenamento."""

    def listar(self, grupo: GrupoCargo | None = None, apenas_ativos: bool = True) -> list[Cargo]: ...
    def buscar_por_id(self, cargo_id: str) -> Cargo | None: ...
    def buscar_parametros(self, cargo_id: str) -> ParametrosCargo | None: ...
    def parametros_por_cargo(self) -> dict[str, ParametrosCargo]: ...
    def inserir(self, cargo: Cargo, parametros: ParametrosCargo) -> None: ...
    def atualizar_parametros(self, parametros: ParametrosCargo) -> None: ...
    def definir_ativo(self, cargo_id: str, ativo: bool) -> None: ...
