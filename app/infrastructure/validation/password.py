"""
Name: Password Strength Validator

Responsibilities:
  - Enforce the password policy: at least 8 characters, one upper-case letter,
    one lower-case letter, one digit, one symbol and no whitespace
  - Report the first broken rule as InvalidParamError("senha", reason)
"""

from __future__ import annotations

from typing import Any, Callable

from ...domain.errors import InvalidParamError

MIN_PASSWORD_LENGTH = 8

# R: (regla que debe cumplirse, motivo si falla). Orden = orden de reporte.
_RULES: tuple[tuple[Callable[[str], bool], str], ...] = (
    (lambda p: not any(c.isspace() for c in p), "não deve conter espaços"),
    (
        lambda p: len(p) >= MIN_PASSWORD_LENGTH,
        f"deve conter ao menos {MIN_PASSWORD_LENGTH} caracteres",
    ),
    (lambda p: any(c.isupper() for c in p), "deve conter ao menos uma letra maiúscula"),
    (lambda p: any(c.islower() for c in p), "deve conter ao menos uma letra minúscula"),
    (lambda p: any(c.isdigit() for c in p), "deve conter ao menos um número"),
    (
        lambda p: any(not c.isalnum() and not c.isspace() for c in p),
        "deve conter ao menos um caractere especial",
    ),
)


class PasswordValidatorAdapter:
    def validate(self, value: Any) -> None:
        if not isinstance(value, str):
            raise InvalidParamError("senha", "formato inválido")
        for rule, reason in _RULES:
            if not rule(value):
                raise InvalidParamError("senha", reason)
