"""
===============================================================================
TARJETA CRC — infrastructure/providers/jwt_provider.py
===============================================================================

Módulo:
    Provider de access tokens (PyJWT, HS256)

Responsabilidades:
    - Firmar tokens con claims {userId, role, iat, exp}.
    - Verificar firma/expiración y reconstruir JwtPayload.
    - Traducir errores de la librería a errores de dominio.

Colaboradores:
    - PyJWT (jwt.encode / jwt.decode)
    - domain.services.JwtPayload / JwtProvider
    - domain.errors.InvalidParamError / ServerError

Decisiones:
    - Token vacío            -> InvalidParamError("token", "não fornecido")
    - Expirado / corrupto    -> InvalidParamError("token", "expirado ou inválido")
    - Falla al firmar        -> ServerError
    - No loguear tokens ni el secreto.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from ...domain.entities import UserRole
from ...domain.errors import InvalidParamError, ServerError
from ...domain.services import JwtPayload

JWT_ALGORITHM: str = "HS256"
DEFAULT_EXPIRES_IN_SECONDS: int = 86400

CLAIM_USER_ID: str = "userId"
CLAIM_ROLE: str = "role"
CLAIM_IAT: str = "iat"
CLAIM_EXP: str = "exp"


class PyJwtProvider:
    """Implementación de JwtProvider sobre PyJWT."""

    def __init__(
        self, secret_key: str, expires_in: int = DEFAULT_EXPIRES_IN_SECONDS
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key is required")
        self._secret = secret_key
        self._expires_in = expires_in

    def sign(self, payload: JwtPayload, expires_in: int | None = None) -> str:
        ttl = self._expires_in if expires_in is None else expires_in
        now = datetime.now(timezone.utc)
        claims = {
            CLAIM_USER_ID: payload.user_id,
            CLAIM_ROLE: UserRole(payload.role).value,
            CLAIM_IAT: now,
            CLAIM_EXP: now + timedelta(seconds=ttl),
        }
        try:
            return jwt.encode(claims, self._secret, algorithm=JWT_ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise ServerError(exc) from exc

    def verify(self, token: str) -> JwtPayload:
        if not token:
            raise InvalidParamError("token", "não fornecido")

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": [CLAIM_EXP, CLAIM_USER_ID, CLAIM_ROLE]},
            )
            return JwtPayload(
                user_id=str(claims[CLAIM_USER_ID]),
                role=UserRole(claims[CLAIM_ROLE]),
            )
        except (jwt.InvalidTokenError, ValueError) as exc:
            raise InvalidParamError("token", "expirado ou inválido") from exc
