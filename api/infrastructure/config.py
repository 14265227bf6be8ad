# api/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

from api.domain.cargo.enums import RegraAcervo
from api.domain.cargo.value_objects import ACERVO_VALOR_FIXO_PADRAO, PoliticaCalculo

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    tabela_referencia: str  # caminho local ou URL http(s); vazio = sem tabela
    tabela_referencia_timeout: int
    regra_acervo: RegraAcervo
    acervo_valor_fixo: Decimal
    admin_email: str
    debug: bool

    @property
    def politica_calculo(self) -> PoliticaCalculo:
        return PoliticaCalculo(
            regra_acervo=self.regra_acervo,
            acervo_valor_fixo=self.acervo_valor_fixo,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        tabela_referencia=os.environ.get("TABELA_REFERENCIA", ""),
        tabela_referencia_timeout=int(os.environ.get("TABELA_REFERENCIA_TIMEOUT", "30")),
        regra_acervo=RegraAcervo(os.environ.get("REGRA_ACERVO", "PROPORCIONAL").upper()),
        acervo_valor_fixo=Decimal(
            os.environ.get("ACERVO_VALOR_FIXO", str(ACERVO_VALOR_FIXO_PADRAO))
        ),
        admin_email=os.environ.get("ADMIN_EMAIL", ""),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
