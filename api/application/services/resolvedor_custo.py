# api/application/services/resolvedor_custo.py
from __future__ import annotations

from api.domain.cargo.custo import calcular_custo
from api.domain.cargo.entities import Cargo, ParametrosCargo
from api.domain.cargo.referencia import TabelaReferencia
from api.domain.cargo.rotulo import derivar_rotulo
from api.domain.cargo.value_objects import CustoCargo, PoliticaCalculo


class ResolvedorCusto:
    """Custo unitario de um cargo: tabela de referencia quando o rotulo existe,
    motor de calculo caso contrario.

    A linha da tabela substitui o resultado inteiro. Nao ha mistura campo a
    campo entre tabela e motor.
    """

    def __init__(
        self,
        tabela: TabelaReferencia | None = None,
        politica: PoliticaCalculo | None = None,
    ) -> None:
        self._tabela = tabela if tabela is not None else TabelaReferencia()
        self._politica = politica or PoliticaCalculo()

    def resolver(self, cargo: Cargo, parametros: ParametrosCargo | None) -> CustoCargo:
        linha = self._tabela.buscar(derivar_rotulo(cargo))
        if linha is not None:
            return linha.como_custo()
        return self.calcular(cargo, parametros)

    def calcular(self, cargo: Cargo, parametros: ParametrosCargo | None) -> CustoCargo:
        """Somente o motor, ignorando a tabela (visao de detalhe do cargo)."""
        if parametros is None:
            parametros = ParametrosCargo.zerados(cargo.id)
        return calcular_custo(cargo, parametros, self._politica)
