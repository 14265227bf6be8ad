# api/application/services/cargo_service.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from decimal import Decimal

from api.domain.cargo.entities import Cargo, ParametrosCargo
from api.domain.cargo.enums import GrupoCargo
from api.domain.cargo.repository import CargoRepository
from api.domain.cargo.rotulo import derivar_rotulo
from api.domain.cargo.value_objects import CustoCargo
from api.domain.erros import AcessoNegado
from api.domain.usuario.value_objects import UsuarioAtual
from api.infrastructure.log import log

from .resolvedor_custo import ResolvedorCusto


@dataclass(frozen=True)
class CargoComCusto:
    cargo: Cargo
    parametros: ParametrosCargo
    rotulo: str
    custo: CustoCargo              # resolvido (tabela de referencia ou motor)
    custo_calculado: CustoCargo    # somente o motor


class CargoService:
    def __init__(self, cargo_repo: CargoRepository, resolvedor: ResolvedorCusto) -> None:
        self._cargo_repo = cargo_repo
        self._resolvedor = resolvedor

    def listar(self, grupo: GrupoCargo | None = None, apenas_ativos: bool = True) -> list[CargoComCusto]:
        parametros = self._cargo_repo.parametros_por_cargo()
        return [
            self._com_custo(cargo, parametros.get(cargo.id))
            for cargo in self._cargo_repo.listar(grupo=grupo, apenas_ativos=apenas_ativos)
        ]

    def obter(self, cargo_id: str) -> CargoComCusto | None:
        cargo = self._cargo_repo.buscar_por_id(cargo_id)
        if cargo is None:
            return None
        return self._com_custo(cargo, self._cargo_repo.buscar_parametros(cargo_id))

    def criar(
        self,
        usuario: UsuarioAtual,
        grupo: GrupoCargo,
        classe: str,
        nome: str,
        parametros: ParametrosCargo,
    ) -> CargoComCusto:
        _exigir_admin(usuario)
        if not nome.strip():
            raise ValueError("Cargo exige nome nao-vazio")
        cargo = Cargo(id=str(uuid.uuid4()), grupo=grupo, classe=classe.strip(), nome=nome.strip())
        parametros = replace(parametros, cargo_id=cargo.id)
        self._cargo_repo.inserir(cargo, parametros)
        log(f"Cargo criado por {usuario.email}: {cargo.nome} ({cargo.grupo})")
        # resposta com os valores como ficaram gravados
        return self._com_custo(cargo, self._cargo_repo.buscar_parametros(cargo.id))

    def atualizar_parametros(
        self,
        usuario: UsuarioAtual,
        parametros: ParametrosCargo,
    ) -> CargoComCusto | None:
        _exigir_admin(usuario)
        cargo = self._cargo_repo.buscar_por_id(parametros.cargo_id)
        if cargo is None:
            return None
        self._cargo_repo.atualizar_parametros(parametros)
        log(f"Parametros atualizados por {usuario.email}: {cargo.nome}")
        return self._com_custo(cargo, self._cargo_repo.buscar_parametros(cargo.id))

    def definir_ativo(self, usuario: UsuarioAtual, cargo_id: str, ativo: bool) -> CargoComCusto | None:
        _exigir_admin(usuario)
        cargo = self._cargo_repo.buscar_por_id(cargo_id)
        if cargo is None:
            return None
        self._cargo_repo.definir_ativo(cargo_id, ativo)
        return self._com_custo(replace(cargo, ativo=ativo), self._cargo_repo.buscar_parametros(cargo_id))

    def total_anual_por_grupo(self) -> dict[GrupoCargo, Decimal]:
        """Soma do custo anual unitario (1 pessoa por cargo) dos cargos ativos."""
        totais = {grupo: Decimal("0") for grupo in GrupoCargo}
        for item in self.listar(apenas_ativos=True):
            totais[item.cargo.grupo] += item.custo.anual
        return totais

    def _com_custo(self, cargo: Cargo, parametros: ParametrosCargo | None) -> CargoComCusto:
        if parametros is None:
            parametros = ParametrosCargo.zerados(cargo.id)
        return CargoComCusto(
            cargo=cargo,
            parametros=parametros,
            rotulo=derivar_rotulo(cargo),
            custo=self._resolvedor.resolver(cargo, parametros),
            custo_calculado=self._resolvedor.calcular(cargo, parametros),
        )


def _exigir_admin(usuario: UsuarioAtual) -> None:
    if not usuario.is_admin:
        raise AcessoNegado(f"Usuario {usuario.email or 'anonimo'} nao e administrador")
