# api/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import logging
import time
from collections import defaultdict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.infrastructure.config import get_settings

logger = logging.getLogger(__name__)

_JANELA_SEGUNDOS = 60.0


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 60s por IP, em memoria do processo."""

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requisicoes: dict[str, list[float]] = defaultdict(list)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute

        # 0 = sem limite (usado em testes)
        if limite == 0:
            return await call_next(request)

        # Integracoes internas do back office
        if request.headers.get("X-API-Key"):
            return await call_next(request)

        cliente = request.client.host if request.client else "unknown"
        agora = time.time()
        recentes = [t for t in self._requisicoes[cliente] if agora - t < _JANELA_SEGUNDOS]

        if len(recentes) >= limite:
            self._requisicoes[cliente] = recentes
            logger.warning("Rate limit excedido para %s", cliente)
            espera = int(_JANELA_SEGUNDOS - (agora - recentes[0])) + 1
            return Response(
                content='{"detail": "Rate limit excedido. Tente novamente em 1 minuto."}',
                status_code=429,
                media_type="application/json",
                headers={"Retry-After": str(espera)},
            )

        recentes.append(agora)
        self._requisicoes[cliente] = recentes
        return await call_next(request)
