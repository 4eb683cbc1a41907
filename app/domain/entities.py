"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Responsabilidades:
  - Modelar el usuario persistido (User) y su vista pública (UserMapped).
  - Modelar los datos transitorios de entrada (UserCreateData, UserAvatarData,
    AuthData) y de salida (AuthResult).
  - Definir defaults de dominio (avatar y role).

Colaboradores:
  - domain.repositories.UserRepository
  - application.usecases.*
  - interfaces.api.http (serialización camelCase vía to_dict)

Invariantes:
  - UserMapped NO tiene campo password (no se puede filtrar por accidente).
  - Entidades inmutables (frozen); los cambios pasan por el repositorio.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any


class UserRole(str, Enum):
    """Roles disponibles para un usuario."""

    ADMIN = "admin"
    COLLABORATOR = "collaborator"
    CLIENT = "client"


USER_DEFAULT_ROLE: UserRole = UserRole.CLIENT
USER_DEFAULT_AVATAR_URL: str = "/uploads/avatars/default.png"


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True, slots=True)
class UserMapped:
    """Usuario sin password: única forma en que un usuario sale del repositorio."""

    id: str
    name: str
    email: str
    phone: str
    birthdate: date
    avatar_url: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "birthdate": _iso(self.birthdate),
            "avatarUrl": self.avatar_url,
            "role": self.role.value,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }


@dataclass(frozen=True, slots=True)
class User:
    """Registro completo (incluye hash de password; uso interno de auth)."""

    id: str
    name: str
    email: str
    phone: str
    birthdate: date
    avatar_url: str
    role: UserRole
    password: str
    created_at: datetime
    updated_at: datetime

    def without_password(self) -> UserMapped:
        return UserMapped(
            id=self.id,
            name=self.name,
            email=self.email,
            phone=self.phone,
            birthdate=self.birthdate,
            avatar_url=self.avatar_url,
            role=self.role,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(frozen=True, slots=True)
class UserCreateData:
    """Datos de alta ya sanitizados/validados (password ya hasheado al persistir)."""

    name: str
    email: str
    phone: str
    birthdate: str
    password: str


@dataclass(frozen=True, slots=True)
class UserAvatarData:
    id: str
    avatar_url: str


@dataclass(frozen=True, slots=True)
class AuthData:
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class AuthResult:
    user: UserMapped
    access_token: str

    def to_dict(self) -> dict[str, Any]:
        return {"user": self.user.to_dict(), "accessToken": self.access_token}


__all__ = [
    "UserRole",
    "USER_DEFAULT_ROLE",
    "USER_DEFAULT_AVATAR_URL",
    "User",
    "UserMapped",
    "UserCreateData",
    "UserAvatarData",
    "AuthData",
    "AuthResult",
]
