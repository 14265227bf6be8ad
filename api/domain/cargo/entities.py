# api/domain/cargo/entities.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .enums import GrupoCargo


@dataclass(frozen=True)
class Cargo:
    """Classificacao do cargo. O grupo define o ramo de calculo e nao muda apos o cadastro."""

    id: str
    grupo: GrupoCargo
    classe: str
    nome: str
    ativo: bool = True


@dataclass(frozen=True)
class ParametrosCargo:
    """Parametros de custo (1:1 com Cargo).

    Auxilios ausentes ficam como None e valem zero no calculo, exceto o
    auxilio transporte de estagiario, que tem valor padrao proprio.
    """

    cargo_id: str
    base_mensal: Decimal = Decimal("0")
    aliquota_patronal: Decimal = Decimal("0")  # fracao: 0.28 = 28%
    auxilio_saude: Decimal | None = None
    auxilio_alimentacao: Decimal | None = None
    auxilio_transporte: Decimal | None = None
    aplica_acervo: bool = False

    @classmethod
    def zerados(cls, cargo_id: str) -> ParametrosCargo:
        """Usado quando o cargo nao tem parametros cadastrados."""
        return cls(cargo_id=cargo_id)

    @property
    def saude(self) -> Decimal:
        return self.auxilio_saude if self.auxilio_saude is not None else Decimal("0")

    @property
    def alimentacao(self) -> Decimal:
        return self.auxilio_alimentacao if self.auxilio_alimentacao is not None else Decimal("0")
