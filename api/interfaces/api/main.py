# api/interfaces/api/main.py
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from api.infrastructure.config import get_settings
from api.interfaces.api.middleware.rate_limit import RateLimitMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from api.infrastructure.duckdb_connection import get_connection

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    get_connection()  # valida conexao no startup
    logger.info("Back office API pronta")
    yield


app = FastAPI(
    title="Back Office Turismo API",
    debug=False,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

from api.interfaces.api.routes.documento_routes import router as documento_router  # noqa: E402
from api.interfaces.api.routes.localidade_routes import router as localidade_router  # noqa: E402
from api.interfaces.api.routes.relatorio_routes import router as relatorio_router  # noqa: E402
from api.interfaces.api.routes.servico_routes import router as servico_router  # noqa: E402

app.include_router(documento_router, prefix="/api")
app.include_router(servico_router, prefix="/api")
app.include_router(relatorio_router, prefix="/api")
app.include_router(localidade_router, prefix="/api")
