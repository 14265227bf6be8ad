# api/interfaces/api/routes/cargo_routes.py
from fastapi import APIRouter, Depends, HTTPException, Query

from api.application.dtos.cargo_dto import (
    AtivoRequestDTO,
    CargoCreateDTO,
    CargoDTO,
    ParametrosRequestDTO,
)
from api.application.services.cargo_service import CargoService
from api.domain.cargo.enums import GrupoCargo
from api.domain.erros import AcessoNegado
from api.domain.usuario.value_objects import UsuarioAtual
from api.interfaces.api.dependencies import get_cargo_service, get_usuario_atual

router = APIRouter()


@router.get("/cargos", response_model=list[CargoDTO])
def listar_cargos(
    grupo: GrupoCargo | None = Query(default=None),  # noqa: B008
    incluir_inativos: bool = Query(default=False),
    service: CargoService = Depends(get_cargo_service),  # noqa: B008
) -> list[CargoDTO]:
    itens = service.listar(grupo=grupo, apenas_ativos=not incluir_inativos)
    return [CargoDTO.from_domain(i) for i in itens]


@router.get("/cargos/{cargo_id}", response_model=CargoDTO)
def obter_cargo(
    cargo_id: str,
    service: CargoService = Depends(get_cargo_service),  # noqa: B008
) -> CargoDTO:
    item = service.obter(cargo_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Cargo nao encontrado")
    return CargoDTO.from_domain(item)


@router.post("/cargos", response_model=CargoDTO, status_code=201)
def criar_cargo(
    body: CargoCreateDTO,
    usuario: UsuarioAtual = Depends(get_usuario_atual),  # noqa: B008
    service: CargoService = Depends(get_cargo_service),  # noqa: B008
) -> CargoDTO:
    try:
        item = service.criar(
            usuario,
            grupo=body.grupo,
            classe=body.classe,
            nome=body.nome,
            parametros=body.parametros.to_domain(cargo_id=""),
        )
    except AcessoNegado as err:
        raise HTTPException(status_code=403, detail=str(err)) from err
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    return CargoDTO.from_domain(item)


@router.put("/cargos/{cargo_id}/parametros", response_model=CargoDTO)
def atualizar_parametros(
    cargo_id: str,
    body: ParametrosRequestDTO,
    usuario: UsuarioAtual = Depends(get_usuario_atual),  # noqa: B008
    service: CargoService = Depends(get_cargo_service),  # noqa: B008
) -> CargoDTO:
    try:
        item = service.atualizar_parametros(usuario, body.to_domain(cargo_id))
    except AcessoNegado as err:
        raise HTTPException(status_code=403, detail=str(err)) from err
    if item is None:
        raise HTTPException(status_code=404, detail="Cargo nao encontrado")
    return CargoDTO.from_domain(item)


@router.patch("/cargos/{cargo_id}/ativo", response_model=CargoDTO)
def definir_ativo(
    cargo_id: str,
    body: AtivoRequestDTO,
    usuario: UsuarioAtual = Depends(get_usuario_atual),  # noqa: B008
    service: CargoService = Depends(get_cargo_service),  # noqa: B008
) -> CargoDTO:
    try:
        item = service.definir_ativo(usuario, cargo_id, body.ativo)
    except AcessoNegado as err:
        raise HTTPException(status_code=403, detail=str(err)) from err
    if item is None:
        raise HTTPException(status_code=404, detail="Cargo nao encontrado")
    return CargoDTO.from_domain(item)
