"""
============================================================
TARJETA CRC
============================================================
Class: app.infrastructure.repositories (Package exports)

Responsibilities:
- Exponer implementaciones concretas de UserRepository (Postgres e InMemory)
  en un único punto de importación.

Collaborators:
- Repositorio Postgres (producción)
- Repositorio InMemory (testing / fallback local)
============================================================
"""

from .in_memory import InMemoryUserRepository
from .postgres import PostgresUserRepository

__all__ = ["InMemoryUserRepository", "PostgresUserRepository"]
