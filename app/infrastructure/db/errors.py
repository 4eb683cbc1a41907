"""
===============================================================================
CRC CARD — infrastructure/db/errors.py
===============================================================================

Componente:
  Errores tipados del Pool

Responsabilidades:
  - Dar semántica clara: "no inicializado", "ya inicializado".
  - Heredan de RuntimeError (uso incorrecto del ciclo de vida).
===============================================================================
"""


class DatabasePoolError(RuntimeError):
    """Base de errores de pool de base de datos."""


class PoolAlreadyInitializedError(DatabasePoolError):
    """Se intentó inicializar el pool más de una vez."""


class PoolNotInitializedError(DatabasePoolError):
    """Se intentó usar el pool sin init_pool()."""
