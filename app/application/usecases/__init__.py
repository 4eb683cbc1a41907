"""
===============================================================================
TARJETA CRC — application/usecases/__init__.py
===============================================================================

Responsabilidades:
  - Exponer los casos de uso con imports estables para container e interfaces.
===============================================================================
"""

from .auth import AuthenticateUserUseCase
from .users import CreateUserUseCase, ListUsersUseCase, UpdateUserAvatarUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "CreateUserUseCase",
    "ListUsersUseCase",
    "UpdateUserAvatarUseCase",
]
