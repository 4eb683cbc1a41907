"""
===============================================================================
CRC CARD — infrastructure/db/pool.py
===============================================================================

Componente:
  Pool de conexiones PostgreSQL (uno por proceso)

Responsabilidades:
  - Abrir el pool en el arranque (solo si el repositorio es Postgres).
  - Entregarlo a los repositorios y cerrarlo en el shutdown.
  - Aplicar statement_timeout a cada conexión nueva.

Colaboradores:
  - psycopg_pool.ConnectionPool
  - crosscutting.config.get_settings (timeout)
  - api/main.py (lifespan), repositories/postgres (consumidores)

Reglas:
  - Doble init o uso sin init fallan enseguida (errores tipados).
===============================================================================
"""

from __future__ import annotations

import threading

from psycopg_pool import ConnectionPool

from ...crosscutting.logger import logger
from .errors import PoolAlreadyInitializedError, PoolNotInitializedError


class _PoolSlot:
    """Contenedor del pool global; el lock serializa init/close."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.pool: ConnectionPool | None = None

    def take(self) -> ConnectionPool | None:
        with self.lock:
            pool, self.pool = self.pool, None
        return pool


_slot = _PoolSlot()


def _configure_connection(conn) -> None:
    from ...crosscutting.config import get_settings

    timeout_ms = int(get_settings().db_statement_timeout_ms)
    if timeout_ms <= 0:
        return
    conn.execute(f"SET statement_timeout = {timeout_ms}")
    conn.commit()


def init_pool(database_url: str, min_size: int, max_size: int) -> ConnectionPool:
    with _slot.lock:
        if _slot.pool is not None:
            raise PoolAlreadyInitializedError("Pool already initialized.")

        _slot.pool = ConnectionPool(
            conninfo=database_url,
            min_size=min_size,
            max_size=max_size,
            configure=_configure_connection,
            open=True,
        )

    logger.info("Pool DB inicializado", extra={"min_size": min_size, "max_size": max_size})
    return _slot.pool


def get_pool() -> ConnectionPool:
    pool = _slot.pool
    if pool is None:
        raise PoolNotInitializedError("Pool not initialized. Call init_pool() first.")
    return pool


def is_pool_initialized() -> bool:
    return _slot.pool is not None


def close_pool() -> None:
    """Cierra el pool si existe (idempotente)."""
    pool = _slot.take()
    if pool is None:
        return
    pool.close()
    logger.info("Pool DB cerrado")


def reset_pool() -> None:
    """Tests: descarta el pool; un error al cerrarlo solo se loguea."""
    pool = _slot.take()
    if pool is None:
        return
    try:
        pool.close()
    except Exception as exc:
        logger.warning("Error cerrando pool en reset", extra={"error": str(exc)})
