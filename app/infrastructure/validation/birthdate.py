"""
Name: Birthdate Validator

Responsibilities:
  - Accept ISO calendar dates (YYYY-MM-DD) that exist and are not in the future
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any, Callable

from ...domain.errors import InvalidParamError

_LABEL = "data de nascimento"
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _today() -> date:
    return datetime.now(timezone.utc).date()


class BirthdateValidatorAdapter:
    def __init__(self, today: Callable[[], date] = _today) -> None:
        self._today = today

    def validate(self, value: Any) -> None:
        if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
            raise InvalidParamError(_LABEL, "formato inválido")
        try:
            birthdate = date.fromisoformat(value)
        except ValueError as exc:
            raise InvalidParamError(_LABEL, "data inválida") from exc
        if birthdate > self._today():
            raise InvalidParamError(_LABEL, "data futura")
