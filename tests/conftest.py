"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure test environment (APP_ENV=test, JWT secret, no .env file)
  - Provide reusable fixtures (repository, providers, fake logger)
  - Setup test data factories

Collaborators:
  - pytest: Test framework
  - unittest.mock: Mocking library
  - app.domain / app.infrastructure: entities and in-memory adapters

Notes:
  - Fixtures are auto-discovered by pytest
  - Settings and container singletons are reset around every test
"""

import os
import sys
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-secret-for-unit-tests-0123456789")

from app.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from app.domain.entities import UserCreateData  # noqa: E402
from app.domain.services import LoggerProvider  # noqa: E402
from app.infrastructure.providers import Argon2HashProvider, PyJwtProvider  # noqa: E402
from app.infrastructure.repositories import InMemoryUserRepository  # noqa: E402

TEST_JWT_SECRET = "test-secret-for-unit-tests-0123456789"
VALID_PASSWORD = "S3nh@Forte"


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (require RUN_INTEGRATION=1)"
    )


@pytest.fixture(autouse=True)
def _reset_singletons():
    """R: Each test starts with fresh Settings and container singletons."""
    from app.container import reset_container

    app_config.get_settings.cache_clear()
    reset_container()
    yield
    app_config.get_settings.cache_clear()
    reset_container()


# ============================================================================
# Adapters
# ============================================================================


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture(scope="session")
def hash_provider() -> Argon2HashProvider:
    return Argon2HashProvider()


@pytest.fixture
def jwt_provider() -> PyJwtProvider:
    return PyJwtProvider(secret_key=TEST_JWT_SECRET)


@pytest.fixture
def mock_logger() -> Mock:
    """R: LoggerProvider mock to assert log messages and contexts."""
    return Mock(spec=LoggerProvider)


# ============================================================================
# Test Data Factories
# ============================================================================


class UserPayloadFactory:
    """R: Raw (pre-sanitizer) payloads as they arrive over HTTP."""

    @staticmethod
    def create(**overrides: Any) -> dict[str, Any]:
        payload = {
            "name": "Maria Silva",
            "email": "maria@example.com",
            "phone": "+5511987654321",
            "birthdate": "1990-05-17",
            "password": VALID_PASSWORD,
        }
        payload.update(overrides)
        return payload


@pytest.fixture
def user_payload_factory() -> type[UserPayloadFactory]:
    return UserPayloadFactory


@pytest.fixture
def registered_user(user_repository, hash_provider):
    """R: Store one user (hashed password) and return it in full form."""
    payload = UserPayloadFactory.create()
    user_repository.create(
        UserCreateData(
            name=payload["name"],
            email=payload["email"],
            phone=payload["phone"],
            birthdate=payload["birthdate"],
            password=hash_provider.hash(payload["password"]),
        )
    )
    return user_repository.find_by_email(payload["email"])
