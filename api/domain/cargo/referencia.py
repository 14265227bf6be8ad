# api/domain/cargo/referencia.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from .enums import OrigemCusto
from .rotulo import normalizar_rotulo
from .value_objects import CustoCargo


@dataclass(frozen=True)
class LinhaReferencia:
    """Linha pre-calculada da planilha externa. Vale como verdade quando o rotulo existe."""

    rotulo: str
    base: Decimal
    contribuicao: Decimal
    auxilio: Decimal
    alimentacao: Decimal
    acervo: Decimal
    mensal: Decimal
    decimo_terceiro: Decimal
    ferias: Decimal
    anual: Decimal

    def como_custo(self) -> CustoCargo:
        return CustoCargo(
            base=self.base,
            contribuicao=self.contribuicao,
            auxilio=self.auxilio,
            alimentacao=self.alimentacao,
            acervo=self.acervo,
            mensal=self.mensal,
            decimo_terceiro=self.decimo_terceiro,
            ferias=self.ferias,
            anual=self.anual,
            origem=OrigemCusto.REFERENCIA,
        )


@dataclass(frozen=True)
class TabelaReferencia:
    """Indice da planilha por rotulo bruto e por rotulo normalizado.

    Linhas repetidas: a ultima vence nos dois indices.
    """

    por_rotulo: dict[str, LinhaReferencia] = field(default_factory=dict)
    por_rotulo_normalizado: dict[str, LinhaReferencia] = field(default_factory=dict)

    @classmethod
    def de_linhas(cls, linhas: Iterable[LinhaReferencia]) -> TabelaReferencia:
        por_rotulo: dict[str, LinhaReferencia] = {}
        for linha in linhas:
            por_rotulo[linha.rotulo] = linha
        por_rotulo_normalizado = {
            normalizar_rotulo(rotulo): linha for rotulo, linha in por_rotulo.items()
        }
        return cls(por_rotulo=por_rotulo, por_rotulo_normalizado=por_rotulo_normalizado)

    def buscar(self, rotulo: str) -> LinhaReferencia | None:
        """Primeiro pelo rotulo normalizado, depois pelo rotulo bruto."""
        linha = self.por_rotulo_normalizado.get(normalizar_rotulo(rotulo))
        if linha is not None:
            return linha
        return self.por_rotulo.get(rotulo)

    def __len__(self) -> int:
        return len(self.por_rotulo)
