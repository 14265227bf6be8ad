# api/interfaces/api/dependencies.py
from fastapi import Header

from api.application.services.cargo_service import CargoService
from api.application.services.cenario_service import CenarioService
from api.application.services.comparacao_service import ComparacaoService
from api.application.services.export_service import ExportService
from api.application.services.resolvedor_custo import ResolvedorCusto
from api.domain.usuario.value_objects import UsuarioAtual
from api.infrastructure.config import get_settings
from api.infrastructure.duckdb_connection import get_connection
from api.infrastructure.repositories.duckdb_cargo_repo import DuckDBCargoRepo
from api.infrastructure.repositories.duckdb_cenario_repo import DuckDBCenarioRepo
from api.infrastructure.repositories.duckdb_stats_repo import DuckDBStatsRepo
from api.infrastructure.tabela_referencia import get_tabela_referencia


def get_resolvedor() -> ResolvedorCusto:
    return ResolvedorCusto(
        tabela=get_tabela_referencia(),
        politica=get_settings().politica_calculo,
    )


def get_cargo_service() -> CargoService:
    return CargoService(
        cargo_repo=DuckDBCargoRepo(get_connection()),
        resolvedor=get_resolvedor(),
    )


def get_cenario_service() -> CenarioService:
    conn = get_connection()
    return CenarioService(
        cenario_repo=DuckDBCenarioRepo(conn),
        cargo_repo=DuckDBCargoRepo(conn),
        resolvedor=get_resolvedor(),
    )


def get_comparacao_service() -> ComparacaoService:
    return ComparacaoService(cenario_service=get_cenario_service())


def get_export_service() -> ExportService:
    return ExportService()


def get_stats_repo() -> DuckDBStatsRepo:
    return DuckDBStatsRepo(get_connection())


def get_usuario_atual(
    x_user_email: str | None = Header(default=None),
    x_user_admin: str | None = Header(default=None),
) -> UsuarioAtual:
    """Cabecalhos preenchidos pelo gateway de autenticacao."""
    return UsuarioAtual.de_cabecalhos(
        email=x_user_email,
        admin=x_user_admin,
        email_admin_fixo=get_settings().admin_email,
    )
