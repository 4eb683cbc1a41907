"""
===============================================================================
TARJETA CRC — app/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (repositorio, providers, validadores) siguiendo DIP.
  - Exponer factories make_* que devuelven instancias completamente cableadas
    (use cases, controllers, middleware) para los routers y los tests.
  - Mantener singletons con caching (lru_cache) para recursos compartidos.
  - Centralizar decisiones runtime basadas en Settings (repositorio, JWT).

Colaboradores:
  - app.crosscutting.config.get_settings
  - app.domain.* (puertos)
  - app.infrastructure.* (implementaciones)
  - app.application.* (sanitizers, validadores, casos de uso)
  - app.interfaces.api.http (controllers, middleware)

Patrones aplicados:
  - Composition Root
  - Dependency Inversion (use cases dependen de puertos)
  - Lazy singletons con lru_cache

Notas:
  - Este archivo NO contiene lógica de negocio ni depende de FastAPI.
  - Tests: reset_container() limpia los singletons entre casos.
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.sanitizers import (
    AuthDataSanitizer,
    UserAvatarDataSanitizer,
    UserCreateDataSanitizer,
)
from .application.usecases import (
    AuthenticateUserUseCase,
    CreateUserUseCase,
    ListUsersUseCase,
    UpdateUserAvatarUseCase,
)
from .application.validators import (
    AuthDataValidator,
    UserAvatarDataValidator,
    UserCreateDataValidator,
    UserUniqueEmailValidator,
)
from .crosscutting.config import get_settings
from .domain.repositories import UserRepository
from .domain.services import HashProvider, JwtProvider, LoggerProvider
from .infrastructure.providers import (
    Argon2HashProvider,
    PyJwtProvider,
    StructuredLoggerProvider,
)
from .infrastructure.repositories import InMemoryUserRepository, PostgresUserRepository
from .infrastructure.validation import (
    BirthdateValidatorAdapter,
    EmailValidatorAdapter,
    PasswordValidatorAdapter,
    PhoneValidatorAdapter,
    UuidIdValidatorAdapter,
)
from .interfaces.api.http.controllers import (
    AuthenticateController,
    CreateUserController,
    ListUsersController,
    UpdateUserAvatarController,
)
from .interfaces.api.http.middlewares import AuthMiddleware

# =============================================================================
# Repositorio y providers (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def make_user_repository() -> UserRepository:
    """Repositorio de usuarios (in-memory en test o si se fuerza; Postgres si no)."""
    if get_settings().uses_in_memory_repository():
        return InMemoryUserRepository()
    return PostgresUserRepository()


@lru_cache(maxsize=1)
def make_hash_provider() -> HashProvider:
    return Argon2HashProvider()


@lru_cache(maxsize=1)
def make_jwt_provider() -> JwtProvider:
    settings = get_settings()
    return PyJwtProvider(
        secret_key=settings.jwt_secret,
        expires_in=settings.jwt_expires_in_seconds,
    )


@lru_cache(maxsize=1)
def make_logger_provider() -> LoggerProvider:
    return StructuredLoggerProvider()


def reset_container() -> None:
    """Limpia los singletons (tests / cambio de Settings)."""
    make_user_repository.cache_clear()
    make_hash_provider.cache_clear()
    make_jwt_provider.cache_clear()
    make_logger_provider.cache_clear()


# =============================================================================
# Validadores compuestos
# =============================================================================


def make_user_create_data_validator() -> UserCreateDataValidator:
    repository = make_user_repository()
    return UserCreateDataValidator(
        email_validator=EmailValidatorAdapter(),
        phone_validator=PhoneValidatorAdapter(get_settings().phone_default_region),
        birthdate_validator=BirthdateValidatorAdapter(),
        password_validator=PasswordValidatorAdapter(),
        unique_email_validator=UserUniqueEmailValidator(repository),
    )


def make_user_avatar_data_validator() -> UserAvatarDataValidator:
    return UserAvatarDataValidator(
        id_validator=UuidIdValidatorAdapter(),
        repository=make_user_repository(),
    )


# =============================================================================
# Casos de uso (por request)
# =============================================================================


def make_create_user_use_case() -> CreateUserUseCase:
    return CreateUserUseCase(
        repository=make_user_repository(),
        sanitizer=UserCreateDataSanitizer(),
        validator=make_user_create_data_validator(),
        hash_provider=make_hash_provider(),
        logger=make_logger_provider(),
    )


def make_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(
        repository=make_user_repository(),
        logger=make_logger_provider(),
    )


def make_update_user_avatar_use_case() -> UpdateUserAvatarUseCase:
    return UpdateUserAvatarUseCase(
        repository=make_user_repository(),
        sanitizer=UserAvatarDataSanitizer(),
        validator=make_user_avatar_data_validator(),
        logger=make_logger_provider(),
    )


def make_authenticate_use_case() -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(
        repository=make_user_repository(),
        sanitizer=AuthDataSanitizer(),
        validator=AuthDataValidator(),
        hash_provider=make_hash_provider(),
        jwt_provider=make_jwt_provider(),
        logger=make_logger_provider(),
    )


# =============================================================================
# Controllers y middleware (por request)
# =============================================================================


def make_create_user_controller() -> CreateUserController:
    return CreateUserController(make_create_user_use_case())


def make_list_users_controller() -> ListUsersController:
    return ListUsersController(make_list_users_use_case())


def make_update_user_avatar_controller() -> UpdateUserAvatarController:
    return UpdateUserAvatarController(make_update_user_avatar_use_case())


def make_authenticate_controller() -> AuthenticateController:
    return AuthenticateController(make_authenticate_use_case())


def make_auth_middleware() -> AuthMiddleware:
    return AuthMiddleware(make_jwt_provider())
