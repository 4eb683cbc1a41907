"""
===============================================================================
TARJETA CRC — interfaces/api/http/helpers.py (Envelope + mapper de errores)
===============================================================================

Responsabilidades:
  - Construir el envelope estándar de respuesta:
        {success, data?, errorMessage?, metadata: {timestamp}}
  - Mapear cualquier excepción a HttpResponse (único mapper del sistema).
  - Serializar entidades (to_dict) y listas de entidades.

Colaboradores:
  - domain.errors (status_code por tipo)
  - crosscutting.config (en producción no se filtra el detalle de errores 500)
  - crosscutting.logger

Política:
  - ApplicationError -> su status_code y mensaje.
  - Cualquier otra cosa -> 500 ServerError (detalle solo fuera de producción).
===============================================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ....crosscutting.config import get_settings
from ....crosscutting.logger import logger
from ....domain.errors import ApplicationError, ServerError
from .protocols import HttpResponse


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def serialize(data: Any) -> Any:
    """R: Entidades con to_dict() -> dict; listas/tuplas recursivas; resto tal cual."""
    if hasattr(data, "to_dict"):
        return data.to_dict()
    if isinstance(data, (list, tuple)):
        return [serialize(item) for item in data]
    return data


def envelope(
    *, success: bool, data: Any = None, error_message: str | None = None
) -> dict[str, Any]:
    body: dict[str, Any] = {"success": success}
    if data is not None:
        body["data"] = serialize(data)
    if error_message is not None:
        body["errorMessage"] = error_message
    body["metadata"] = {"timestamp": _timestamp()}
    return body


def ok(data: Any = None) -> HttpResponse:
    return HttpResponse(status_code=200, body=envelope(success=True, data=data))


def created(data: Any = None) -> HttpResponse:
    return HttpResponse(status_code=201, body=envelope(success=True, data=data))


def _as_server_error(error: BaseException) -> ServerError:
    # R: En producción el 500 no expone el mensaje interno.
    if get_settings().is_production():
        return ServerError()
    return ServerError(error)


def handle_error(error: BaseException) -> HttpResponse:
    """Convierte cualquier excepción en una respuesta HTTP con envelope de error."""
    if not isinstance(error, ApplicationError):
        logger.error(
            "Error no controlado",
            exc_info=(type(error), error, error.__traceback__),
            extra={"error_name": type(error).__name__},
        )
        error = _as_server_error(error)

    return HttpResponse(
        status_code=error.status_code,
        body=envelope(success=False, error_message=error.message),
    )
