"""
===============================================================================
MÓDULO: Contexto del request (ContextVar)
===============================================================================

Responsabilidades:
  - Guardar request_id / método / path del request en curso.
  - Exponerlos como dict para que el JSONFormatter los agregue a cada log.

Colaboradores:
  - crosscutting/middleware.py (setea y limpia)
  - crosscutting/logger.py (lee)

Notas:
  - Un único ContextVar con un snapshot inmutable: setear o limpiar es atómico.
  - Las claves del JSON llevan prefijo http_ ("method" lo usan los casos de uso).
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class RequestContext:
    request_id: str = ""
    http_method: str = ""
    http_path: str = ""


_EMPTY = RequestContext()
_current: ContextVar[RequestContext] = ContextVar("request_context", default=_EMPTY)


def set_request_context(
    *, request_id: str = "", method: str = "", path: str = ""
) -> None:
    _current.set(
        RequestContext(
            request_id=request_id or "", http_method=method or "", http_path=path or ""
        )
    )


def get_context_dict() -> dict[str, str]:
    """Contexto actual sin claves vacías."""
    return {key: value for key, value in asdict(_current.get()).items() if value}


def clear_context() -> None:
    _current.set(_EMPTY)
