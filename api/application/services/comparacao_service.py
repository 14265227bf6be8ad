# api/application/services/comparacao_service.py
from __future__ import annotations

from .agregacao import Comparacao, comparar
from .cenario_service import CenarioService


class ComparacaoService:
    def __init__(self, cenario_service: CenarioService) -> None:
        self._cenario_service = cenario_service

    def comparar(self, cenario_a_id: str, cenario_b_id: str) -> Comparacao | None:
        """None se algum dos cenarios nao existe. Cenario sem itens soma zero."""
        # Leituras independentes; ambas precisam terminar antes do delta.
        resumo_a = self._cenario_service.resumo(cenario_a_id)
        resumo_b = self._cenario_service.resumo(cenario_b_id)
        if resumo_a is None or resumo_b is None:
            return None
        return comparar(resumo_a, resumo_b)
