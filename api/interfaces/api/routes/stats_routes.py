# api/interfaces/api/routes/stats_routes.py
from fastapi import APIRouter, Depends

from api.application.dtos.stats_dto import GrupoStatsDTO, StatsDTO
from api.application.services.cargo_service import CargoService
from api.domain.cargo.enums import GrupoCargo
from api.domain.cargo.value_objects import arredondar
from api.infrastructure.repositories.duckdb_stats_repo import DuckDBStatsRepo
from api.interfaces.api.dependencies import get_cargo_service, get_stats_repo

router = APIRouter()


@router.get("/stats", response_model=StatsDTO)
def get_stats(
    repo: DuckDBStatsRepo = Depends(get_stats_repo),  # noqa: B008
    cargo_service: CargoService = Depends(get_cargo_service),  # noqa: B008
) -> StatsDTO:
    data = repo.obter_stats()
    por_grupo: dict[GrupoCargo, int] = data["cargos_por_grupo"]  # type: ignore[assignment]
    totais = cargo_service.total_anual_por_grupo()
    return StatsDTO(
        total_cargos=data["total_cargos"],  # type: ignore[arg-type]
        total_cenarios=data["total_cenarios"],  # type: ignore[arg-type]
        grupos={
            grupo.value: GrupoStatsDTO(
                cargos=por_grupo[grupo],
                total_anual=str(arredondar(totais[grupo])),
            )
            for grupo in GrupoCargo
        },
    )
