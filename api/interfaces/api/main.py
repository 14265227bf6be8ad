# api/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.domain.erros import ErroArmazenamento
from api.infrastructure.config import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from api.infrastructure.duckdb_connection import get_connection
    from api.infrastructure.tabela_referencia import get_tabela_referencia
    get_connection()  # valida conexao e aplica schema no startup
    get_tabela_referencia()
    yield


app = FastAPI(
    title="Simulador de Impacto de Pessoal API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.exception_handler(ErroArmazenamento)
async def erro_armazenamento_handler(request: Request, exc: ErroArmazenamento) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": str(exc), "operacao": exc.operacao})


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)

from api.interfaces.api.routes.cargo_routes import router as cargo_router  # noqa: E402
from api.interfaces.api.routes.cenario_routes import router as cenario_router  # noqa: E402
from api.interfaces.api.routes.comparacao_routes import router as comparacao_router  # noqa: E402
from api.interfaces.api.routes.export_routes import router as export_router  # noqa: E402
from api.interfaces.api.routes.stats_routes import router as stats_router  # noqa: E402

app.include_router(cargo_router, prefix="/api")
app.include_router(cenario_router, prefix="/api")
app.include_router(comparacao_router, prefix="/api")
app.include_router(export_router, prefix="/api")
app.include_router(stats_router, prefix="/api")
