"""
===============================================================================
TARJETA CRC — app/api/exception_handlers.py (Manejo Centralizado de Excepciones)
===============================================================================

Responsabilidades:
  - Responder con el MISMO envelope de la API ({success:false, errorMessage,
    metadata}) cuando el error ocurre fuera de un controller: rutas
    inexistentes, métodos no permitidos, middleware de auth, excepciones
    no controladas.
  - Evitar filtrar detalles internos en producción (vía handle_error).

Colaboradores:
  - interfaces.api.http.helpers (envelope, handle_error)
  - interfaces.api.http.adapters (MiddlewareRejected, to_json_response)
  - crosscutting.logger
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..crosscutting.logger import logger
from ..interfaces.api.http.adapters import MiddlewareRejected, to_json_response
from ..interfaces.api.http.helpers import envelope, handle_error


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


async def middleware_rejected_handler(
    request: Request, exc: MiddlewareRejected
) -> JSONResponse:
    return to_json_response(exc.response)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(success=False, error_message=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    first = (exc.errors() or [{}])[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"Parâmetro inválido: {location}." if location else "Parâmetro inválido."
    return JSONResponse(
        status_code=400, content=envelope(success=False, error_message=message)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback: log completo + 500 con envelope (detalle solo fuera de producción)."""
    logger.error(
        "Excepción no controlada",
        exc_info=True,
        extra={"request_id": _request_id_from(request), "error": str(exc)},
    )
    return to_json_response(handle_error(exc))


def register_exception_handlers(app) -> None:
    """
    Registra handlers en la app FastAPI.

    Importante:
      - Exception genérica se registra al final como fallback.
    """
    app.add_exception_handler(MiddlewareRejected, middleware_rejected_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
