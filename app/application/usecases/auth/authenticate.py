"""
===============================================================================
USE CASE: Authenticate User
===============================================================================

Business Goal:
    Intercambiar credenciales (email + password) por un access token.

Seguridad:
    - "Email inexistente" y "password incorrecto" producen EL MISMO error
      (InvalidCredentialsError, 401): no se filtra qué parte falló.
    - El usuario devuelto nunca incluye el hash del password.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    AuthenticateUserUseCase

Responsibilities:
    - Sanitizar y exigir credenciales.
    - Buscar por email y comparar hash.
    - Firmar JWT con {userId, role}.
    - Devolver AuthResult(user sin password, access_token).

Collaborators:
    - UserRepository.find_by_email
    - HashProvider.compare
    - JwtProvider.sign
    - LoggerProvider
===============================================================================
"""

from __future__ import annotations

from typing import Any

from ....domain.entities import AuthResult
from ....domain.errors import InvalidCredentialsError
from ....domain.repositories import UserRepository
from ....domain.services import (
    DataValidator,
    HashProvider,
    JwtPayload,
    JwtProvider,
    LoggerProvider,
    Sanitizer,
)
from ..log_context import describe_error, log_context, with_metadata


class AuthenticateUserUseCase:
    def __init__(
        self,
        *,
        repository: UserRepository,
        sanitizer: Sanitizer,
        validator: DataValidator,
        hash_provider: HashProvider,
        jwt_provider: JwtProvider,
        logger: LoggerProvider,
    ) -> None:
        self._users = repository
        self._sanitizer = sanitizer
        self._validator = validator
        self._hasher = hash_provider
        self._jwt = jwt_provider
        self._logger = logger

    def execute(self, data: Any) -> AuthResult:
        context = log_context(type(self).__name__, "execute")

        try:
            self._logger.debug("Iniciando processo de autenticação de usuário", context)

            credentials = self._sanitizer.sanitize(data)
            context = with_metadata(context, userEmail=credentials.get("email"))
            self._validator.validate(credentials)

            # -----------------------------------------------------------------
            # 1) Usuario + password (mismo error en ambos fallos)
            # -----------------------------------------------------------------
            user = self._users.find_by_email(credentials["email"])
            if user is None:
                raise InvalidCredentialsError()

            if not self._hasher.compare(credentials["password"], user.password):
                raise InvalidCredentialsError()

            # -----------------------------------------------------------------
            # 2) Token
            # -----------------------------------------------------------------
            access_token = self._jwt.sign(JwtPayload(user_id=user.id, role=user.role))

            self._logger.info(
                "Usuário autenticado com sucesso",
                with_metadata(context, userId=user.id),
            )
            return AuthResult(user=user.without_password(), access_token=access_token)
        except Exception as exc:
            self._logger.error(
                "Erro ao autenticar usuário",
                with_metadata(context, error=describe_error(exc)),
            )
            raise
