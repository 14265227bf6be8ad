"""Calculo do custo unitario de um cargo. Funcao pura, zero IO.

Cada grupo tem seu proprio ramo. Comissionados pagam contribuicao sobre
as ferias. Estagiarios nao seguem mensal*12 + 13o + ferias.
"""

from __future__ import annotations

from decimal import Decimal

from .entities import Cargo, ParametrosCargo
from .enums import GrupoCargo
from .value_objects import TRANSPORTE_ESTAGIARIO_PADRAO, CustoCargo, PoliticaCalculo

_ZERO = Decimal("0")
_MESES = 12


def calcular_custo(
    cargo: Cargo,
    parametros: ParametrosCargo,
    politica: PoliticaCalculo | None = None,
) -> CustoCargo:
    """Mesma entrada = mesma saida. Entradas negativas nao sao rejeitadas."""
    politica = politica or PoliticaCalculo()

    if cargo.grupo is GrupoCargo.ESTAGIARIO:
        return _custo_estagiario(parametros)

    base = parametros.base_mensal
    contribuicao = base * parametros.aliquota_patronal
    acervo = politica.valor_acervo(base) if parametros.aplica_acervo else _ZERO
    decimo = base + contribuicao

    if cargo.grupo is GrupoCargo.COMISSIONADO:
        ferias = _um_terco(base) + _um_terco(base) * parametros.aliquota_patronal
    else:
        ferias = _um_terco(base)

    mensal = base + contribuicao + parametros.saude + parametros.alimentacao + acervo
    anual = mensal * _MESES + decimo + ferias

    return CustoCargo(
        base=base,
        contribuicao=contribuicao,
        auxilio=parametros.saude,
        alimentacao=parametros.alimentacao,
        acervo=acervo,
        mensal=mensal,
        decimo_terceiro=decimo,
        ferias=ferias,
        anual=anual,
    )


def _um_terco(base: Decimal) -> Decimal:
    """Remuneracao de ferias: base + 1/3."""
    return base + base / 3


def _custo_estagiario(parametros: ParametrosCargo) -> CustoCargo:
    """Bolsa + transporte. Sem contribuicao, 13o, ferias ou outros auxilios."""
    base = parametros.base_mensal
    transporte = (
        parametros.auxilio_transporte
        if parametros.auxilio_transporte is not None
        else TRANSPORTE_ESTAGIARIO_PADRAO
    )
    return CustoCargo(
        base=base,
        contribuicao=_ZERO,
        auxilio=transporte,
        alimentacao=_ZERO,
        acervo=_ZERO,
        mensal=base + transporte,
        decimo_terceiro=_ZERO,
        ferias=_ZERO,
        anual=_MESES * (base + transporte),
    )
