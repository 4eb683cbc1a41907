"""
Name: Argon2 Hash Provider

Responsibilities:
  - Hash passwords with Argon2 (argon2-cffi defaults)
  - Compare a plain password against a stored hash

Notes:
  - compare() never raises for a mismatch or a malformed hash: it returns False
    so authentication answers with the same 401 in every failure case.
"""

from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError


class Argon2HashProvider:
    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._hasher = hasher or PasswordHasher()

    def hash(self, plain: str) -> str:
        return self._hasher.hash(plain)

    def compare(self, plain: str, hashed: str) -> bool:
        try:
            return self._hasher.verify(hashed, plain)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False
