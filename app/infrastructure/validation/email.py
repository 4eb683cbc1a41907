"""
Name: Email Format Validator

Responsibilities:
  - Validate e-mail syntax with pydantic's EmailStr (email-validator backend)

Notes:
  - Deliverability (DNS) is not checked: validation must stay offline.
"""

from __future__ import annotations

from typing import Any

from pydantic import EmailStr, TypeAdapter, ValidationError

from ...domain.errors import InvalidParamError

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


class EmailValidatorAdapter:
    def validate(self, value: Any) -> None:
        if not isinstance(value, str):
            raise InvalidParamError("email", "formato inválido")
        try:
            _EMAIL_ADAPTER.validate_python(value)
        except ValidationError as exc:
            raise InvalidParamError("email", "formato inválido") from exc
