"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Almacenar usuarios en memoria (tests / desarrollo local sin DB).
  - Generar id, avatar y role por defecto y timestamps al crear.
  - Devolver vistas sin password en find_by_id / list.
  - Comportarse igual que PostgresUserRepository en todas las operaciones.

Collaborators:
  - domain.entities (User, UserMapped, UserCreateData, UserAvatarData)
  - domain.repositories.UserRepository (contrato a implementar)

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - Orden de listado = orden de inserción (created_at ASC), igual que Postgres.
  - update_avatar sobre un id inexistente lanza UnregisteredParamError
    (nunca corrompe el store).
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone
from threading import Lock
from typing import Dict, List, Optional
from uuid import uuid4

from ....domain.entities import (
    USER_DEFAULT_AVATAR_URL,
    USER_DEFAULT_ROLE,
    User,
    UserAvatarData,
    UserCreateData,
    UserMapped,
)
from ....domain.errors import DuplicateResourceError, UnregisteredParamError
from ....domain.repositories import UserRepository


class InMemoryUserRepository(UserRepository):
    """
    Repositorio in-memory, thread-safe, para usuarios.

    Modelo mental:
    - _users es la "tabla" en memoria (id -> User), dict preserva inserción.
    - email es único, igual que la constraint de la tabla users.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[str, User] = {}

    @staticmethod
    def _now() -> datetime:
        """R: Fuente única de tiempo (UTC)."""
        return datetime.now(timezone.utc)

    def create(self, data: UserCreateData) -> None:
        now = self._now()
        user = User(
            id=str(uuid4()),
            name=data.name,
            email=data.email,
            phone=data.phone,
            birthdate=date.fromisoformat(data.birthdate),
            avatar_url=USER_DEFAULT_AVATAR_URL,
            role=USER_DEFAULT_ROLE,
            password=data.password,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            if any(u.email == data.email for u in self._users.values()):
                raise DuplicateResourceError("email")
            self._users[user.id] = user

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user
        return None

    def find_by_id(self, user_id: str) -> Optional[UserMapped]:
        with self._lock:
            user = self._users.get(user_id)
        return user.without_password() if user else None

    def list(self) -> List[UserMapped]:
        with self._lock:
            return [user.without_password() for user in self._users.values()]

    def update_avatar(self, data: UserAvatarData) -> None:
        with self._lock:
            current = self._users.get(data.id)
            if current is None:
                raise UnregisteredParamError("id")
            self._users[data.id] = replace(
                current, avatar_url=data.avatar_url, updated_at=self._now()
            )
