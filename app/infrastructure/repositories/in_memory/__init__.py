"""Repositorios in-memory (tests / desarrollo sin DB)."""

from .user import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]
