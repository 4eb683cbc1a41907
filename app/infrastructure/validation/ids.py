"""
Name: User Id Validator

Responsibilities:
  - User ids are canonical lower-case UUID strings (the form repositories
    generate); anything else is InvalidParamError("id", "formato inválido")
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from ...domain.errors import InvalidParamError


class UuidIdValidatorAdapter:
    def validate(self, value: Any) -> None:
        if not isinstance(value, str):
            raise InvalidParamError("id", "formato inválido")
        try:
            canonical = str(UUID(value))
        except ValueError as exc:
            raise InvalidParamError("id", "formato inválido") from exc
        if canonical != value:
            raise InvalidParamError("id", "formato inválido")
