# api/interfaces/api/routes/export_routes.py
from datetime import datetime
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from api.application.dtos.relatorio_dto import RelatorioCenariosDTO
from api.application.services.cenario_service import CenarioService
from api.application.services.export_service import ExportService
from api.interfaces.api.dependencies import get_cenario_service, get_export_service

router = APIRouter()


@router.get("/relatorios/cenarios")
def export_cenarios(
    formato: Literal["csv", "json", "pdf"] = Query(...),
    cenario_service: CenarioService = Depends(get_cenario_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    gerado_em = datetime.now()
    relatorio = RelatorioCenariosDTO.from_domain(
        cenario_service.relatorio(),
        gerado_em=gerado_em.isoformat(timespec="seconds"),
    )
    nome_arquivo = f"cenarios_{gerado_em:%Y-%m-%d}"

    if formato == "json":
        return Response(
            content=export_service.exportar_json(relatorio),
            media_type="application/json",
        )
    if formato == "csv":
        return Response(
            content=export_service.exportar_csv(relatorio),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename={nome_arquivo}.csv"},
        )
    # pdf
    try:
        from api.infrastructure.pdf_generator import gerar_pdf_relatorio

        pdf_bytes = gerar_pdf_relatorio(relatorio)
    except RuntimeError as err:
        raise HTTPException(status_code=501, detail=str(err)) from err
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={nome_arquivo}.pdf"},
    )
