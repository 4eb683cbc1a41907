"""
===============================================================================
MÓDULO: Middleware HTTP de contexto
===============================================================================

RequestContextMiddleware:
   - Aceptar el X-Request-Id del cliente (si es razonable) o generar uno
   - Setear el contexto del request para los logs y limpiarlo al final
   - Un log por request con status y latencia (excepto /health)

Colaboradores:
  - app/context.py
  - crosscutting/logger.py
===============================================================================
"""

from __future__ import annotations

import time
import uuid
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..context import clear_context, set_request_context
from .logger import logger

REQUEST_ID_HEADER = "X-Request-Id"
MAX_REQUEST_ID_LENGTH = 128

_QUIET_PATHS = frozenset({"/health"})


def resolve_request_id(incoming: str | None) -> str:
    """R: Reusa el id del cliente si no está vacío y no es excesivo."""
    candidate = (incoming or "").strip()
    if candidate and len(candidate) <= MAX_REQUEST_ID_LENGTH:
        return candidate
    return str(uuid.uuid4())


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        set_request_context(
            request_id=request_id, method=request.method, path=request.url.path
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request falló",
                extra={"status_code": 500, "latency_ms": _elapsed_ms(started)},
            )
            clear_context()
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        if request.url.path not in _QUIET_PATHS:
            logger.info(
                "request completado",
                extra={
                    "status_code": response.status_code,
                    "latency_ms": _elapsed_ms(started),
                },
            )
        clear_context()
        return response
