"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos de proveedores y del pipeline sanitize → validate (Protocols)

Responsabilidades:
    - Definir contratos para hash de passwords, JWT y logging estructurado.
    - Definir contratos de sanitizers y validators (campo y compuestos).
    - Mantener application independiente de argon2 / PyJWT / librerías de formato.

Colaboradores:
    - infrastructure/providers/*: implementaciones concretas.
    - infrastructure/validation/*: validadores de campo.
    - application/*: consumen estos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from .entities import UserRole


@dataclass(frozen=True, slots=True)
class JwtPayload:
    """Claims de identidad que viajan en el access token."""

    user_id: str
    role: UserRole


class HashProvider(Protocol):
    """Contrato para hashear y comparar passwords."""

    def hash(self, plain: str) -> str: ...

    def compare(self, plain: str, hashed: str) -> bool: ...


class JwtProvider(Protocol):
    """Contrato para firmar y verificar tokens."""

    def sign(self, payload: JwtPayload, expires_in: int | None = None) -> str: ...

    def verify(self, token: str) -> JwtPayload: ...


class LoggerProvider(Protocol):
    """
    Logger estructurado.

    `context` sigue la forma {service, method, metadata}.
    """

    def debug(self, message: str, context: Mapping[str, Any] | None = None) -> None: ...

    def info(self, message: str, context: Mapping[str, Any] | None = None) -> None: ...

    def warning(
        self, message: str, context: Mapping[str, Any] | None = None
    ) -> None: ...

    def error(self, message: str, context: Mapping[str, Any] | None = None) -> None: ...


class Sanitizer(Protocol):
    """Normaliza input crudo. Nunca lanza; input no-dict -> {}."""

    def sanitize(self, data: Any) -> dict[str, Any]: ...


class FieldValidator(Protocol):
    """Valida un valor aislado; lanza un ApplicationError si es inválido."""

    def validate(self, value: Any) -> None: ...


class DataValidator(Protocol):
    """Valida un payload completo (presencia → formato → existencia/unicidad)."""

    def validate(self, data: Mapping[str, Any]) -> None: ...
