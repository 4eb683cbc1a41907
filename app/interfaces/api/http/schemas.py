"""
===============================================================================
TARJETA CRC — interfaces/api/http/schemas.py
===============================================================================

Responsabilidades:
  - Documentar (OpenAPI) los cuerpos JSON aceptados por la API.

Notas:
  - NO se usan para validar: el body llega crudo al controller para que
    sanitizer + validator produzcan los errores del dominio (400/404/409)
    en lugar de un 422 genérico.
===============================================================================
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class UserCreateRequest(BaseModel):
    name: str = Field(..., examples=["Maria Silva"])
    email: str = Field(..., examples=["maria@example.com"])
    phone: str = Field(..., examples=["+5511987654321"])
    birthdate: str = Field(..., description="YYYY-MM-DD", examples=["1990-05-17"])
    password: str = Field(..., examples=["S3nh@Forte"])


class UserAvatarRequest(BaseModel):
    id: str = Field(..., description="UUID del usuario")
    avatarUrl: str = Field(..., examples=["https://cdn.example.com/a.png"])


class LoginRequest(BaseModel):
    email: str
    password: str


def json_body(model: type[BaseModel]) -> dict[str, Any]:
    """R: openapi_extra para declarar el requestBody sin validarlo."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
