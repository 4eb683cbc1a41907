"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import (
    USER_DEFAULT_AVATAR_URL,
    USER_DEFAULT_ROLE,
    AuthData,
    AuthResult,
    User,
    UserAvatarData,
    UserCreateData,
    UserMapped,
    UserRole,
)
from .errors import (
    ApplicationError,
    DuplicateResourceError,
    InvalidCredentialsError,
    InvalidParamError,
    MissingParamError,
    ServerError,
    UnregisteredParamError,
)
from .repositories import UserRepository
from .services import (
    DataValidator,
    FieldValidator,
    HashProvider,
    JwtPayload,
    JwtProvider,
    LoggerProvider,
    Sanitizer,
)

__all__ = [
    # Entities
    "User",
    "UserMapped",
    "UserRole",
    "UserCreateData",
    "UserAvatarData",
    "AuthData",
    "AuthResult",
    "USER_DEFAULT_ROLE",
    "USER_DEFAULT_AVATAR_URL",
    # Errors
    "ApplicationError",
    "MissingParamError",
    "InvalidParamError",
    "InvalidCredentialsError",
    "UnregisteredParamError",
    "DuplicateResourceError",
    "ServerError",
    # Ports
    "UserRepository",
    "HashProvider",
    "JwtProvider",
    "JwtPayload",
    "LoggerProvider",
    "Sanitizer",
    "FieldValidator",
    "DataValidator",
]
