# api/application/services/cenario_service.py
from __future__ import annotations

import uuid
from collections.abc import Iterable
from datetime import date, datetime

from api.domain.cargo.repository import CargoRepository
from api.domain.cenario.entities import Cenario, ItemCenario, mesclar_itens
from api.domain.cenario.repository import CenarioRepository
from api.infrastructure.log import log

from .agregacao import Comparacao, ResumoCenario, agregar_cenario, comparar
from .resolvedor_custo import ResolvedorCusto


class CenarioService:
    """Imperative Shell: le cenarios e cargos dos repos e chama o Pure Core (agregacao)."""

    def __init__(
        self,
        cenario_repo: CenarioRepository,
        cargo_repo: CargoRepository,
        resolvedor: ResolvedorCusto,
    ) -> None:
        self._cenario_repo = cenario_repo
        self._cargo_repo = cargo_repo
        self._resolvedor = resolvedor

    def listar(self) -> list[Cenario]:
        return self._cenario_repo.listar()

    def obter(self, cenario_id: str) -> Cenario | None:
        return self._cenario_repo.buscar_por_id(cenario_id)

    def criar(
        self,
        nome: str,
        data_base: date,
        descricao: str | None = None,
        itens: Iterable[ItemCenario] = (),
    ) -> Cenario:
        cenario = Cenario(
            id=str(uuid.uuid4()),
            nome=nome.strip(),
            descricao=descricao or None,
            data_base=data_base,
            criado_em=datetime.now(),
        )
        self._cenario_repo.inserir(cenario)
        mesclados = mesclar_itens(itens)
        if mesclados:
            self._cenario_repo.substituir_itens(cenario.id, mesclados)
        log(f"Cenario criado: {cenario.nome} ({len(mesclados)} cargo(s))")
        return cenario

    def remover(self, cenario_id: str) -> bool:
        if self._cenario_repo.buscar_por_id(cenario_id) is None:
            return False
        self._cenario_repo.remover(cenario_id)
        log(f"Cenario removido: {cenario_id}")
        return True

    def listar_itens(self, cenario_id: str) -> list[ItemCenario]:
        return self._cenario_repo.listar_itens(cenario_id)

    def salvar_itens(self, cenario_id: str, itens: Iterable[ItemCenario]) -> ResumoCenario | None:
        """Substitui o conjunto inteiro de itens (replace-all, sem diff)."""
        if self._cenario_repo.buscar_por_id(cenario_id) is None:
            return None
        mesclados = mesclar_itens(itens)
        self._cenario_repo.substituir_itens(cenario_id, mesclados)
        log(f"Cenario {cenario_id}: {len(mesclados)} item(ns) salvos")
        return self.resumir(mesclados)

    def adicionar_itens(self, cenario_id: str, itens: Iterable[ItemCenario]) -> ResumoCenario | None:
        """Confirma o passo de impacto: soma aos itens existentes e salva."""
        if self._cenario_repo.buscar_por_id(cenario_id) is None:
            return None
        atuais = self._cenario_repo.listar_itens(cenario_id)
        return self.salvar_itens(cenario_id, mesclar_itens(atuais, itens))

    def simular_impacto(self, cenario_id: str, itens: Iterable[ItemCenario]) -> Comparacao | None:
        """Cenario atual (A) contra cenario com os novos itens (B). Nada e salvo."""
        if self._cenario_repo.buscar_por_id(cenario_id) is None:
            return None
        atuais = self._cenario_repo.listar_itens(cenario_id)
        return comparar(self.resumir(atuais), self.resumir(mesclar_itens(atuais, itens)))

    def resumo(self, cenario_id: str) -> ResumoCenario | None:
        if self._cenario_repo.buscar_por_id(cenario_id) is None:
            return None
        return self.resumir(self._cenario_repo.listar_itens(cenario_id))

    def resumir(self, itens: Iterable[ItemCenario]) -> ResumoCenario:
        cargos = {c.id: c for c in self._cargo_repo.listar(apenas_ativos=False)}
        parametros = self._cargo_repo.parametros_por_cargo()
        return agregar_cenario(itens, cargos, parametros, self._resolvedor)

    def relatorio(self) -> list[tuple[Cenario, ResumoCenario]]:
        """Todos os cenarios (mais recentes primeiro) com seus resumos."""
        cargos = {c.id: c for c in self._cargo_repo.listar(apenas_ativos=False)}
        parametros = self._cargo_repo.parametros_por_cargo()
        return [
            (
                cenario,
                agregar_cenario(
                    self._cenario_repo.listar_itens(cenario.id),
                    cargos,
                    parametros,
                    self._resolvedor,
                ),
            )
            for cenario in self._cenario_repo.listar()
        ]
