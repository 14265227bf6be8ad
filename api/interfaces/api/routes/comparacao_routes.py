# api/interfaces/api/routes/comparacao_routes.py
from fastapi import APIRouter, Depends, HTTPException, Query

from api.application.dtos.cenario_dto import ComparacaoDTO
from api.application.services.comparacao_service import ComparacaoService
from api.interfaces.api.dependencies import get_comparacao_service

router = APIRouter()


@router.get("/comparacao", response_model=ComparacaoDTO)
def comparar_cenarios(
    cenario_a: str = Query(..., min_length=1),
    cenario_b: str = Query(..., min_length=1),
    service: ComparacaoService = Depends(get_comparacao_service),  # noqa: B008
) -> ComparacaoDTO:
    comparacao = service.comparar(cenario_a, cenario_b)
    if comparacao is None:
        raise HTTPException(status_code=404, detail="Cenario nao encontrado")
    return ComparacaoDTO.from_domain(comparacao)
