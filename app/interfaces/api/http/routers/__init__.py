"""
===============================================================================
TARJETA CRC — app/interfaces/api/http/routers/__init__.py
===============================================================================

Responsibilities:
    - Re-exportar routers por contexto (users, auth). No define endpoints.
===============================================================================
"""

from .auth import router as auth_router
from .users import router as users_router

__all__ = ["auth_router", "users_router"]
