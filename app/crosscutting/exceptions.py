# app/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones de infraestructura
===============================================================================

Objetivo
--------
Errores técnicos (DB, pool) con:
- error_id para correlación con logs
- message "humana" (sin filtrar secretos)

A diferencia de domain.errors, NO son errores esperados del flujo: el mapper
HTTP los trata como ServerError (500).

Colaboradores:
  - infrastructure/repositories/postgres (lanza DatabaseError)
  - interfaces/api/http/helpers.handle_error
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class InfrastructureError(Exception):
    """Base para errores técnicos del sistema."""

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(InfrastructureError):
    """Errores de DB (conexión, query, timeout, pool)."""

