"""Validadores de campo (delegan en librerías de formato)."""

from .birthdate import BirthdateValidatorAdapter
from .email import EmailValidatorAdapter
from .ids import UuidIdValidatorAdapter
from .password import PasswordValidatorAdapter
from .phone import PhoneValidatorAdapter

__all__ = [
    "BirthdateValidatorAdapter",
    "EmailValidatorAdapter",
    "PasswordValidatorAdapter",
    "PhoneValidatorAdapter",
    "UuidIdValidatorAdapter",
]
