# api/interfaces/api/routes/cenario_routes.py
from fastapi import APIRouter, Depends, HTTPException, Response

from api.application.dtos.cenario_dto import (
    CenarioCreateDTO,
    CenarioDetalheDTO,
    CenarioDTO,
    ComparacaoDTO,
    ItensRequestDTO,
    ResumoCenarioDTO,
)
from api.application.services.cenario_service import CenarioService
from api.interfaces.api.dependencies import get_cenario_service

router = APIRouter()

_NAO_ENCONTRADO = "Cenario nao encontrado"


@router.get("/cenarios", response_model=list[CenarioDTO])
def listar_cenarios(
    service: CenarioService = Depends(get_cenario_service),  # noqa: B008
) -> list[CenarioDTO]:
    return [CenarioDTO.from_domain(c) for c in service.listar()]


@router.post("/cenarios", response_model=CenarioDetalheDTO, status_code=201)
def criar_cenario(
    body: CenarioCreateDTO,
    service: CenarioService = Depends(get_cenario_service),  # noqa: B008
) -> CenarioDetalheDTO:
    try:
        cenario = service.criar(
            nome=body.nome,
            data_base=body.data_base,
            descricao=body.descricao,
            itens=[i.to_domain() for i in body.itens],
        )
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    resumo = service.resumo(cenario.id)
    if resumo is None:
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return CenarioDetalheDTO(
        cenario=CenarioDTO.from_domain(cenario),
        resumo=ResumoCenarioDTO.from_domain(resumo),
    )


@router.get("/cenarios/{cenario_id}", response_model=CenarioDetalheDTO)
def obter_cenario(
    cenario_id: str,
    service: CenarioService = Depends(get_cenario_service),  # noqa: B008
) -> CenarioDetalheDTO:
    cenario = service.obter(cenario_id)
    resumo = service.resumo(cenario_id)
    if cenario is None or resumo is None:
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return CenarioDetalheDTO(
        cenario=CenarioDTO.from_domain(cenario),
        resumo=ResumoCenarioDTO.from_domain(resumo),
    )


@router.delete("/cenarios/{cenario_id}", status_code=204)
def remover_cenario(
    cenario_id: str,
    service: CenarioService = Depends(get_cenario_service),  # noqa: B008
) -> Response:
    if not service.remover(cenario_id):
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return Response(status_code=204)


@router.put("/cenarios/{cenario_id}/itens", response_model=ResumoCenarioDTO)
def salvar_itens(
    cenario_id: str,
    body: ItensRequestDTO,
    service: CenarioService = Depends(get_cenario_service),  # noqa: B008
) -> ResumoCenarioDTO:
    """Substitui todos os itens do cenario pelo conjunto enviado."""
    resumo = service.salvar_itens(cenario_id, body.to_domain())
    if resumo is None:
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return ResumoCenarioDTO.from_domain(resumo)


@router.post("/cenarios/{cenario_id}/itens", response_model=ResumoCenarioDTO)
def adicionar_itens(
    cenario_id: str,
    body: ItensRequestDTO,
    service: CenarioService = Depends(get_cenario_service),  # noqa: B008
) -> ResumoCenarioDTO:
    """Soma as quantidades enviadas as ja existentes e salva."""
    resumo = service.adicionar_itens(cenario_id, body.to_domain())
    if resumo is None:
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return ResumoCenarioDTO.from_domain(resumo)


@router.post("/cenarios/{cenario_id}/impacto", response_model=ComparacaoDTO)
def simular_impacto(
    cenario_id: str,
    body: ItensRequestDTO,
    service: CenarioService = Depends(get_cenario_service),  # noqa: B008
) -> ComparacaoDTO:
    comparacao = service.simular_impacto(cenario_id, body.to_domain())
    if comparacao is None:
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADO)
    return ComparacaoDTO.from_domain(comparacao)
