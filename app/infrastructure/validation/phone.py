"""
Name: Phone Number Validator

Responsibilities:
  - Parse and validate phone numbers with `phonenumbers` (libphonenumber port)
  - Accept national numbers for the configured default region (BR by default)
    and international numbers in E.164 (+55...)
"""

from __future__ import annotations

from typing import Any

import phonenumbers
from phonenumbers import NumberParseException

from ...domain.errors import InvalidParamError


class PhoneValidatorAdapter:
    def __init__(self, default_region: str = "BR") -> None:
        self._region = default_region

    def validate(self, value: Any) -> None:
        if not isinstance(value, str):
            raise InvalidParamError("telefone", "formato inválido")
        try:
            number = phonenumbers.parse(value, self._region)
        except NumberParseException as exc:
            raise InvalidParamError("telefone", "formato inválido") from exc
        if not phonenumbers.is_valid_number(number):
            raise InvalidParamError("telefone", "formato inválido")
