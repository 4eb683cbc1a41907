"""
===============================================================================
TARJETA CRC — app/interfaces/api/http/routers/users.py
===============================================================================

Responsibilities:
    - POST  /api/users         alta de usuario (pública)         -> 201
    - GET   /api/users         listado (requiere bearer token)  -> 200
    - PATCH /api/users/avatar  actualiza avatar (requiere token) -> 201

Collaborators:
    - app.container (factories de controllers y middleware)
    - interfaces.api.http.adapters (adapt_route / adapt_middleware)
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.container import (
    make_auth_middleware,
    make_create_user_controller,
    make_list_users_controller,
    make_update_user_avatar_controller,
)

from ..adapters import adapt_middleware, adapt_route
from ..schemas import UserAvatarRequest, UserCreateRequest, json_body

router = APIRouter(prefix="/api/users", tags=["users"])

require_auth = adapt_middleware(make_auth_middleware)

router.add_api_route(
    "",
    adapt_route(make_create_user_controller),
    methods=["POST"],
    status_code=201,
    summary="Create user",
    openapi_extra=json_body(UserCreateRequest),
)
router.add_api_route(
    "",
    adapt_route(make_list_users_controller),
    methods=["GET"],
    summary="List users",
    dependencies=[Depends(require_auth)],
)
router.add_api_route(
    "/avatar",
    adapt_route(make_update_user_avatar_controller),
    methods=["PATCH"],
    status_code=201,
    summary="Update user avatar",
    dependencies=[Depends(require_auth)],
    openapi_extra=json_body(UserAvatarRequest),
)
