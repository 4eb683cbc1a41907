"""
===============================================================================
TARJETA CRC — application/validators/user.py (Validadores compuestos)
===============================================================================

Responsabilidades:
  - Orquestar validadores de campo sobre payloads ya sanitizados.
  - Consultar el repositorio para unicidad (email) y existencia (id).

Colaboradores:
  - domain.services.FieldValidator (email, teléfono, fecha, password, id)
  - domain.repositories.UserRepository
  - domain.errors (MissingParam, Duplicate, Unregistered)

Orden (determinístico, fail-fast):
  1) Presencia de campos obligatorios  -> MissingParamError(label)
  2) Formato de cada campo             -> InvalidParamError
  3) Existencia / unicidad             -> UnregisteredParamError / DuplicateResourceError
===============================================================================
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ...domain.errors import (
    DuplicateResourceError,
    MissingParamError,
    UnregisteredParamError,
)
from ...domain.repositories import UserRepository
from ...domain.services import FieldValidator


def require_fields(data: Mapping[str, Any], fields: Sequence[tuple[str, str]]) -> None:
    """R: Lanza MissingParamError con el label del primer campo vacío/ausente."""
    for field, label in fields:
        if not data.get(field):
            raise MissingParamError(label)


class UserUniqueEmailValidator:
    """Rechaza emails ya registrados."""

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def validate(self, value: Any) -> None:
        if self._users.find_by_email(value) is not None:
            raise DuplicateResourceError("email")


class UserCreateDataValidator:
    """Valida el alta de usuario."""

    REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
        ("name", "nome"),
        ("email", "email"),
        ("phone", "telefone"),
        ("birthdate", "data de nascimento"),
        ("password", "senha"),
    )

    def __init__(
        self,
        *,
        email_validator: FieldValidator,
        phone_validator: FieldValidator,
        birthdate_validator: FieldValidator,
        password_validator: FieldValidator,
        unique_email_validator: FieldValidator,
    ) -> None:
        self._email = email_validator
        self._phone = phone_validator
        self._birthdate = birthdate_validator
        self._password = password_validator
        self._unique_email = unique_email_validator

    def validate(self, data: Mapping[str, Any]) -> None:
        require_fields(data, self.REQUIRED_FIELDS)

        self._email.validate(data["email"])
        self._phone.validate(data["phone"])
        self._birthdate.validate(data["birthdate"])
        self._password.validate(data["password"])

        self._unique_email.validate(data["email"])


class UserAvatarDataValidator:
    """Valida la actualización de avatar."""

    REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
        ("id", "Id"),
        ("avatarUrl", "avatar"),
    )

    def __init__(self, *, id_validator: FieldValidator, repository: UserRepository) -> None:
        self._id = id_validator
        self._users = repository

    def validate(self, data: Mapping[str, Any]) -> None:
        require_fields(data, self.REQUIRED_FIELDS)

        self._id.validate(data["id"])

        if self._users.find_by_id(data["id"]) is None:
            raise UnregisteredParamError("id")


class AuthDataValidator:
    """Credenciales presentes (el formato no se valida: no filtrar pistas)."""

    REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
        ("email", "email"),
        ("password", "senha"),
    )

    def validate(self, data: Mapping[str, Any]) -> None:
        require_fields(data, self.REQUIRED_FIELDS)
