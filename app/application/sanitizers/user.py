"""
===============================================================================
TARJETA CRC — application/sanitizers/user.py
===============================================================================

Responsabilidades:
  - Normalizar payloads crudos de usuario antes de validarlos.
  - Garantizar salida dict con TODAS las claves conocidas (faltantes -> "").

Colaboradores:
  - application.usecases.users (consumidores)
  - domain.services.Sanitizer (contrato)

Reglas:
  - Nunca lanza: input que no sea dict -> {}.
  - Idempotente: sanitize(sanitize(x)) == sanitize(x).
  - Passwords no se recortan (se validan tal cual los escribió el usuario).
===============================================================================
"""

from __future__ import annotations

from typing import Any, Mapping


def _text(value: Any) -> str:
    """None -> ""; escalares -> str sin espacios en los bordes."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value).strip()
    return ""


def _raw(value: Any) -> str:
    return value if isinstance(value, str) else ""


class UserCreateDataSanitizer:
    """Alta de usuario: trim de todo, email en minúsculas."""

    def sanitize(self, data: Any) -> dict[str, Any]:
        if not isinstance(data, Mapping):
            return {}
        return {
            "name": _text(data.get("name")),
            "email": _text(data.get("email")).lower(),
            "phone": _text(data.get("phone")),
            "birthdate": _text(data.get("birthdate")),
            "password": _raw(data.get("password")),
        }


class UserAvatarDataSanitizer:
    """Avatar: id con trim; URL con trim + minúsculas."""

    def sanitize(self, data: Any) -> dict[str, Any]:
        if not isinstance(data, Mapping):
            return {}
        return {
            "id": _text(data.get("id")),
            "avatarUrl": _text(data.get("avatarUrl")).lower(),
        }


class AuthDataSanitizer:
    """Credenciales: email con trim + minúsculas, password intacto."""

    def sanitize(self, data: Any) -> dict[str, Any]:
        if not isinstance(data, Mapping):
            return {}
        return {
            "email": _text(data.get("email")).lower(),
            "password": _raw(data.get("password")),
        }
