"""
===============================================================================
TARJETA CRC — interfaces/api/http/adapters.py (FastAPI <-> HttpRequest/Response)
===============================================================================

Responsabilidades:
  - adapt_route: endpoint FastAPI que arma un HttpRequest, ejecuta el
    controller (en threadpool, los controllers son síncronos) y devuelve
    JSONResponse con el status/body del HttpResponse.
  - adapt_middleware: dependencia FastAPI que ejecuta un Middleware; si
    responde 200 guarda {userId, userRole} en request.state, si no corta
    la request con MiddlewareRejected.

Colaboradores:
  - interfaces.api.http.protocols
  - api.exception_handlers (renderiza MiddlewareRejected)
  - container.make_* (factories que devuelven instancias cableadas)

Notas:
  - El body se lee crudo: ausencia de body es un error del controller
    (MissingParamError), no un 422 de FastAPI.
===============================================================================
"""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ....domain.errors import InvalidParamError
from .helpers import handle_error
from .protocols import Controller, HttpRequest, HttpResponse, Middleware

_NO_BODY = object()


class MiddlewareRejected(Exception):
    """La request no pasó un middleware; lleva la respuesta ya construida."""

    def __init__(self, response: HttpResponse) -> None:
        self.response = response
        super().__init__(response.body.get("errorMessage", ""))


def to_json_response(response: HttpResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.body)


async def _read_body(request: Request) -> Any:
    raw = await request.body()
    if not raw or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return _NO_BODY


def adapt_route(
    make_controller: Callable[[], Controller],
) -> Callable[[Request], Awaitable[JSONResponse]]:
    async def endpoint(request: Request) -> JSONResponse:
        body = await _read_body(request)
        if body is _NO_BODY:
            return to_json_response(
                handle_error(InvalidParamError("corpo da requisição", "JSON inválido"))
            )

        http_request = HttpRequest(
            body=body,
            headers=dict(request.headers),
            params=dict(request.path_params),
            query=dict(request.query_params),
            user_id=getattr(request.state, "user_id", None),
            user_role=getattr(request.state, "user_role", None),
        )
        controller = make_controller()
        response = await run_in_threadpool(controller.handle, http_request)
        return to_json_response(response)

    return endpoint


def adapt_middleware(
    make_middleware: Callable[[], Middleware],
) -> Callable[[Request], None]:
    def dependency(request: Request) -> None:
        response = make_middleware().handle(HttpRequest(headers=dict(request.headers)))
        if response.status_code != 200:
            raise MiddlewareRejected(response)

        identity = response.body.get("data") or {}
        request.state.user_id = identity.get("userId")
        request.state.user_role = identity.get("userRole")

    return dependency
