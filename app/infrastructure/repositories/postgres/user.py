"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - Crear usuarios, buscarlos por email / id, listarlos y actualizar avatar.
  - Ejecutar SQL parametrizado contra la tabla `users` (contrato con migraciones).
  - Mapear filas crudas -> User / UserMapped y validar `UserRole`.
  - Exponer fallos consistentes vía `DatabaseError` con logging estructurado.

Collaborators:
  - psycopg_pool.ConnectionPool (inyectable; por defecto el pool global)
  - domain.entities (User, UserMapped, UserRole, defaults)
  - crosscutting.logger.logger / crosscutting.exceptions.DatabaseError

Constraints / Notes:
  - Retorna None cuando no existe el recurso (no exception por "not found").
  - Un id que no es UUID no puede existir: find_by_id -> None sin tocar la DB.
  - La unicidad de email la garantiza el validador; si igual llega una
    violación del índice UNIQUE se traduce a DuplicateResourceError.
  - Orden estable en listados: created_at ASC, id ASC (orden de alta).
============================================================
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional
from uuid import UUID, uuid4

from psycopg import errors as pg_errors
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import (
    USER_DEFAULT_AVATAR_URL,
    USER_DEFAULT_ROLE,
    User,
    UserAvatarData,
    UserCreateData,
    UserMapped,
    UserRole,
)
from ....domain.errors import DuplicateResourceError, UnregisteredParamError

# ============================================================
# Constantes y contratos de SQL
# ============================================================
# R: Lista explícita de columnas para mantener el contrato estable con migraciones.
_USER_COLUMNS = (
    "id, name, email, phone, birthdate, avatar_url, role, password, "
    "created_at, updated_at"
)

_USER_ORDER_BY = "created_at ASC, id ASC"


def _row_to_user(row: tuple) -> User:
    """
    Convierte una fila de `users` a entidad `User`.

    Role casting estricto: si el valor no matchea el enum -> DatabaseError.
    """
    try:
        role = UserRole(row[6])
    except ValueError as exc:
        raise DatabaseError(f"Invalid user role in database: {row[6]}") from exc

    return User(
        id=str(row[0]),
        name=row[1],
        email=row[2],
        phone=row[3],
        birthdate=row[4],
        avatar_url=row[5],
        role=role,
        password=row[7],
        created_at=row[8],
        updated_at=row[9],
    )


def _database_error(
    log_msg: str, log_extra: dict[str, object], exc: Exception
) -> DatabaseError:
    """R: Loguea la falla con el error_id del DatabaseError que se va a lanzar."""
    error = DatabaseError(f"{log_msg}: {exc}", original_error=exc)
    logger.exception(
        log_msg, extra={**log_extra, "error": str(exc), "error_id": error.error_id}
    )
    return error


def _parse_uuid(value: str) -> UUID | None:
    try:
        return UUID(str(value))
    except ValueError:
        return None


class PostgresUserRepository:
    """Implementación PostgreSQL de UserRepository."""

    def __init__(self, pool: ConnectionPool | None = None) -> None:
        self._pool = pool

    # =========================================================
    # Helpers internos: pool + ejecución
    # =========================================================
    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool
        from ...db.pool import get_pool

        return get_pool()

    def _fetchone(
        self,
        *,
        query: str,
        params: Iterable[object],
        log_msg: str,
        log_extra: dict[str, object],
    ) -> tuple | None:
        """Ejecuta un SELECT/RETURNING ... fetchone() con manejo consistente de errores."""
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except Exception as exc:
            raise _database_error(log_msg, log_extra, exc) from exc

    def _fetchall(
        self,
        *,
        query: str,
        params: Iterable[object] = (),
        log_msg: str,
        log_extra: dict[str, object],
    ) -> list[tuple]:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchall()
        except Exception as exc:
            raise _database_error(log_msg, log_extra, exc) from exc

    # =========================================================
    # API del repositorio
    # =========================================================
    def create(self, data: UserCreateData) -> None:
        params = (
            uuid4(),
            data.name,
            data.email,
            data.phone,
            date.fromisoformat(data.birthdate),
            USER_DEFAULT_AVATAR_URL,
            USER_DEFAULT_ROLE.value,
            data.password,
        )
        try:
            with self._get_pool().connection() as conn:
                conn.execute(
                    """
                    INSERT INTO users (
                        id, name, email, phone, birthdate, avatar_url, role, password
                    )
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                    """,
                    params,
                )
        except pg_errors.UniqueViolation as exc:
            raise DuplicateResourceError("email") from exc
        except Exception as exc:
            raise _database_error(
                "PostgresUserRepository: create failed", {"email": data.email}, exc
            ) from exc

    def find_by_email(self, email: str) -> Optional[User]:
        row = self._fetchone(
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s",
            params=(email,),
            log_msg="PostgresUserRepository: find_by_email failed",
            log_extra={"email": email},
        )
        return _row_to_user(row) if row else None

    def find_by_id(self, user_id: str) -> Optional[UserMapped]:
        uid = _parse_uuid(user_id)
        if uid is None:
            return None
        row = self._fetchone(
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s",
            params=(uid,),
            log_msg="PostgresUserRepository: find_by_id failed",
            log_extra={"user_id": str(user_id)},
        )
        return _row_to_user(row).without_password() if row else None

    def list(self) -> List[UserMapped]:
        rows = self._fetchall(
            query=f"SELECT {_USER_COLUMNS} FROM users ORDER BY {_USER_ORDER_BY}",
            log_msg="PostgresUserRepository: list failed",
            log_extra={},
        )
        return [_row_to_user(row).without_password() for row in rows]

    def update_avatar(self, data: UserAvatarData) -> None:
        uid = _parse_uuid(data.id)
        if uid is None:
            raise UnregisteredParamError("id")
        row = self._fetchone(
            query="""
                UPDATE users
                SET avatar_url = %s, updated_at = NOW()
                WHERE id = %s
                RETURNING id
            """,
            params=(data.avatar_url, uid),
            log_msg="PostgresUserRepository: update_avatar failed",
            log_extra={"user_id": data.id},
        )
        if row is None:
            raise UnregisteredParamError("id")
