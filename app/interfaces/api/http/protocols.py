"""
===============================================================================
TARJETA CRC — interfaces/api/http/protocols.py
===============================================================================

Responsabilidades:
  - Definir la forma HTTP "neutral" que consumen controllers y middlewares
    (independiente de FastAPI/Starlette).
  - Definir los contratos Controller y Middleware.

Colaboradores:
  - interfaces.api.http.adapters (FastAPI Request -> HttpRequest -> Response)
  - interfaces.api.http.controllers / middlewares
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol


@dataclass(frozen=True, slots=True)
class HttpRequest:
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)
    # R: identidad inyectada por el middleware de auth (None en rutas públicas)
    user_id: str | None = None
    user_role: str | None = None


@dataclass(frozen=True, slots=True)
class HttpResponse:
    status_code: int
    body: dict[str, Any]


class Controller(Protocol):
    """handle() nunca lanza: todo camino termina en un HttpResponse."""

    def handle(self, request: HttpRequest) -> HttpResponse: ...


class Middleware(Protocol):
    """200 = dejar pasar (body.data trae la identidad); otro status = cortar."""

    def handle(self, request: HttpRequest) -> HttpResponse: ...
