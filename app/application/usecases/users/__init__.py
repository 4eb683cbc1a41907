"""Use cases de usuarios (alta, listado, avatar)."""

from .create_user import CreateUserUseCase
from .list_users import ListUsersUseCase
from .update_avatar import UpdateUserAvatarUseCase

__all__ = ["CreateUserUseCase", "ListUsersUseCase", "UpdateUserAvatarUseCase"]
