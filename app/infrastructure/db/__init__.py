"""Infraestructura de base de datos: pool de conexiones y errores tipados."""

from .errors import DatabasePoolError, PoolAlreadyInitializedError, PoolNotInitializedError
from .pool import close_pool, get_pool, init_pool, is_pool_initialized, reset_pool

__all__ = [
    "DatabasePoolError",
    "PoolAlreadyInitializedError",
    "PoolNotInitializedError",
    "init_pool",
    "get_pool",
    "close_pool",
    "reset_pool",
    "is_pool_initialized",
]
