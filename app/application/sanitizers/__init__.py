"""Sanitizers: normalización de input previa a la validación."""

from .user import AuthDataSanitizer, UserAvatarDataSanitizer, UserCreateDataSanitizer

__all__ = [
    "UserCreateDataSanitizer",
    "UserAvatarDataSanitizer",
    "AuthDataSanitizer",
]
