"""
===============================================================================
TARJETA CRC — interfaces/api/http/middlewares.py (Auth gate)
===============================================================================

Responsabilidades:
  - Extraer el bearer token del header Authorization.
  - Verificarlo con el JwtProvider (un único intento, sin reintentos).
  - Responder ok({userId, userRole}) o el error mapeado por handle_error.

Estados:
  NoHeader        -> 400 MissingParamError("token de autenticação")
  MalformedHeader -> 400 InvalidParamError("token", "formato inválido")
  TokenInvalid    -> 400 InvalidParamError del provider
  Authenticated   -> 200 {userId, userRole}

Colaboradores:
  - domain.services.JwtProvider
  - interfaces.api.http.helpers
===============================================================================
"""

from __future__ import annotations

from typing import Mapping

from ....domain.errors import InvalidParamError, MissingParamError
from ....domain.services import JwtProvider
from .helpers import handle_error, ok
from .protocols import HttpRequest, HttpResponse

BEARER = "Bearer"


def _authorization_header(headers: Mapping[str, str] | None) -> str | None:
    if not headers:
        return None
    for key, value in headers.items():
        if key.lower() == "authorization":
            return value
    return None


class AuthMiddleware:
    def __init__(self, jwt_provider: JwtProvider) -> None:
        self._jwt = jwt_provider

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            auth_header = _authorization_header(request.headers)
            if not auth_header:
                raise MissingParamError("token de autenticação")

            parts = auth_header.split(" ")
            scheme = parts[0]
            token = parts[1] if len(parts) > 1 else ""
            if scheme != BEARER or not token:
                raise InvalidParamError("token", "formato inválido")

            payload = self._jwt.verify(token)

            return ok({"userId": payload.user_id, "userRole": payload.role.value})
        except Exception as exc:
            return handle_error(exc)
