"""
===============================================================================
TARJETA CRC — interfaces/api/http/controllers/users.py
===============================================================================

Responsabilidades:
  - Traducir HttpRequest -> llamada al caso de uso -> HttpResponse.
  - Exigir cuerpo de request donde corresponde (MissingParamError);
    null o un escalar falso cuentan como cuerpo ausente.
  - No lanzar nunca: todo error pasa por handle_error.

Colaboradores:
  - application.usecases.users (Create / List / UpdateAvatar)
  - interfaces.api.http.helpers (created / ok / handle_error)
===============================================================================
"""

from __future__ import annotations

from .....application.usecases.users import (
    CreateUserUseCase,
    ListUsersUseCase,
    UpdateUserAvatarUseCase,
)
from .....domain.errors import MissingParamError
from ..helpers import created, handle_error, ok
from ..protocols import HttpRequest, HttpResponse

MISSING_BODY = "corpo da requisição não informado"


def is_missing_body(body: object) -> bool:
    """R: Sin cuerpo = None o escalar falso ('', false, 0); {} y [] siguen al caso de uso."""
    return body is None or (not body and not isinstance(body, (dict, list)))


class CreateUserController:
    def __init__(self, use_case: CreateUserUseCase) -> None:
        self._use_case = use_case

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            if is_missing_body(request.body):
                raise MissingParamError(MISSING_BODY)

            self._use_case.execute(request.body)
            return created()
        except Exception as exc:
            return handle_error(exc)


class ListUsersController:
    def __init__(self, use_case: ListUsersUseCase) -> None:
        self._use_case = use_case

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            return ok(self._use_case.execute())
        except Exception as exc:
            return handle_error(exc)


class UpdateUserAvatarController:
    def __init__(self, use_case: UpdateUserAvatarUseCase) -> None:
        self._use_case = use_case

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            if is_missing_body(request.body):
                raise MissingParamError(MISSING_BODY)

            self._use_case.execute(request.body)
            return created()
        except Exception as exc:
            return handle_error(exc)
