"""Providers concretos: hash (argon2), JWT (PyJWT) y logger estructurado."""

from .hashing import Argon2HashProvider
from .jwt_provider import PyJwtProvider
from .logger import StructuredLoggerProvider

__all__ = ["Argon2HashProvider", "PyJwtProvider", "StructuredLoggerProvider"]
