"""
Name: Auth Middleware Unit Tests

Responsibilities:
  - NoHeader        -> 400 MissingParamError
  - MalformedHeader -> 400 InvalidParamError("token", "formato inválido")
  - TokenInvalid    -> 400 provider error
  - Authenticated   -> 200 {userId, userRole}
"""

import pytest

from app.domain.entities import UserRole
from app.domain.services import JwtPayload
from app.interfaces.api.http.middlewares import AuthMiddleware
from app.interfaces.api.http.protocols import HttpRequest

pytestmark = pytest.mark.unit

USER_ID = "3f1c8b6e-2d4a-4e7b-9a1c-5d6e7f8a9b0c"


@pytest.fixture
def middleware(jwt_provider) -> AuthMiddleware:
    return AuthMiddleware(jwt_provider)


def test_no_header(middleware):
    response = middleware.handle(HttpRequest(headers={}))

    assert response.status_code == 400
    assert response.body["errorMessage"] == (
        "Parâmetro obrigatório não informado: token de autenticação"
    )


@pytest.mark.parametrize("header", ["Token abc", "Bearer", "Bearer ", "bearer abc"])
def test_malformed_header(middleware, header):
    response = middleware.handle(HttpRequest(headers={"Authorization": header}))

    assert response.status_code == 400
    assert response.body["errorMessage"] == "Parâmetro inválido: Token. Formato inválido."


def test_invalid_token(middleware):
    response = middleware.handle(HttpRequest(headers={"authorization": "Bearer nope"}))

    assert response.status_code == 400
    assert response.body["errorMessage"] == "Parâmetro inválido: Token. Expirado ou inválido."


def test_expired_token(middleware, jwt_provider):
    token = jwt_provider.sign(
        JwtPayload(user_id=USER_ID, role=UserRole.CLIENT), expires_in=-5
    )

    response = middleware.handle(HttpRequest(headers={"authorization": f"Bearer {token}"}))

    assert response.status_code == 400
    assert "Expirado ou inválido" in response.body["errorMessage"]


def test_authenticated(middleware, jwt_provider):
    token = jwt_provider.sign(JwtPayload(user_id=USER_ID, role=UserRole.COLLABORATOR))

    response = middleware.handle(HttpRequest(headers={"Authorization": f"Bearer {token}"}))

    assert response.status_code == 200
    assert response.body["data"] == {"userId": USER_ID, "userRole": "collaborator"}
