"""
TARJETA CRC — interfaces/api/http/controllers/auth.py

Responsabilidades:
  - Login: exigir cuerpo, delegar en AuthenticateUserUseCase, responder
    200 con {user, accessToken}.

Colaboradores:
  - application.usecases.auth.AuthenticateUserUseCase
  - interfaces.api.http.helpers
"""

from __future__ import annotations

from .....application.usecases.auth import AuthenticateUserUseCase
from .....domain.errors import MissingParamError
from ..helpers import handle_error, ok
from ..protocols import HttpRequest, HttpResponse
from .users import MISSING_BODY, is_missing_body


class AuthenticateController:
    def __init__(self, use_case: AuthenticateUserUseCase) -> None:
        self._use_case = use_case

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            if is_missing_body(request.body):
                raise MissingParamError(MISSING_BODY)

            return ok(self._use_case.execute(request.body))
        except Exception as exc:
            return handle_error(exc)
