"""Controllers HTTP (framework-agnósticos)."""

from .auth import AuthenticateController
from .users import (
    MISSING_BODY,
    CreateUserController,
    ListUsersController,
    UpdateUserAvatarController,
)

__all__ = [
    "AuthenticateController",
    "CreateUserController",
    "ListUsersController",
    "UpdateUserAvatarController",
    "MISSING_BODY",
]
