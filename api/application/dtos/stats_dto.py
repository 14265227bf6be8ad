# api/application/dtos/stats_dto.py
from pydantic import BaseModel


class GrupoStatsDTO(BaseModel):
    cargos: int           # cadastrados, ativos ou nao
    total_anual: str      # soma do anual unitario dos cargos ativos


class StatsDTO(BaseModel):
    total_cargos: int
    total_cenarios: int
    grupos: dict[str, GrupoStatsDTO]
