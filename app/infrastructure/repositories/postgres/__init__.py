"""Repositorios PostgreSQL (SQL crudo parametrizado)."""

from .user import PostgresUserRepository

__all__ = ["PostgresUserRepository"]
