# api/domain/cargo/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .enums import OrigemCusto, RegraAcervo

_CENTAVOS = Decimal("0.01")

# Auxilio transporte do estagiario quando nao cadastrado.
TRANSPORTE_ESTAGIARIO_PADRAO = Decimal("176.00")

# Valor do acervo na regra FIXO.
ACERVO_VALOR_FIXO_PADRAO = Decimal("800.00")


def arredondar(valor: Decimal) -> Decimal:
    """2 casas, meio para cima. Somente na apresentacao, nunca em passos intermediarios."""
    return valor.quantize(_CENTAVOS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PoliticaCalculo:
    """Escolhas de calculo que variam entre versoes da planilha de referencia."""

    regra_acervo: RegraAcervo = RegraAcervo.PROPORCIONAL
    acervo_valor_fixo: Decimal = ACERVO_VALOR_FIXO_PADRAO

    def valor_acervo(self, base: Decimal) -> Decimal:
        if self.regra_acervo is RegraAcervo.FIXO:
            return self.acervo_valor_fixo
        return (base / 30) * 7


@dataclass(frozen=True)
class CustoCargo:
    """Custo unitario de um cargo. Valores sem arredondamento.

    `auxilio` e o auxilio saude para os grupos com contribuicao patronal e o
    auxilio transporte para estagiarios, mesmo formato da tabela de referencia.
    """

    base: Decimal
    contribuicao: Decimal
    auxilio: Decimal
    alimentacao: Decimal
    acervo: Decimal
    mensal: Decimal
    decimo_terceiro: Decimal
    ferias: Decimal
    anual: Decimal
    origem: OrigemCusto = OrigemCusto.CALCULADO
