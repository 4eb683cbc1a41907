"""Use cases de autenticación."""

from .authenticate import AuthenticateUserUseCase

__all__ = ["AuthenticateUserUseCase"]
