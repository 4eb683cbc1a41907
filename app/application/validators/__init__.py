"""Validadores compuestos (presencia → formato → existencia/unicidad)."""

from .user import (
    AuthDataValidator,
    UserAvatarDataValidator,
    UserCreateDataValidator,
    UserUniqueEmailValidator,
    require_fields,
)

__all__ = [
    "UserCreateDataValidator",
    "UserAvatarDataValidator",
    "UserUniqueEmailValidator",
    "AuthDataValidator",
    "require_fields",
]
