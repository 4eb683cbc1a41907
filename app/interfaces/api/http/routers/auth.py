"""
TARJETA CRC — app/interfaces/api/http/routers/auth.py

Responsibilities:
    - POST /api/auth/login: credenciales -> {user, accessToken} (pública)

Collaborators:
    - app.container.make_authenticate_controller
    - interfaces.api.http.adapters.adapt_route
"""

from __future__ import annotations

from fastapi import APIRouter

from app.container import make_authenticate_controller

from ..adapters import adapt_route
from ..schemas import LoginRequest, json_body

router = APIRouter(prefix="/api/auth", tags=["auth"])

router.add_api_route(
    "/login",
    adapt_route(make_authenticate_controller),
    methods=["POST"],
    summary="Authenticate user",
    openapi_extra=json_body(LoginRequest),
)
