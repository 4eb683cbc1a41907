"""
===============================================================================
USE CASE: Create User
===============================================================================

Business Goal:
    Registrar un usuario nuevo garantizando:
      - datos normalizados (trim, email en minúsculas)
      - formato válido de email, teléfono, fecha de nacimiento y password
      - email único
      - password persistido SOLO como hash

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateUserUseCase

Responsibilities:
    - Sanitizar el payload crudo.
    - Validarlo (presencia → formato → unicidad).
    - Hashear el password y persistir vía repositorio.
    - Loguear cada paso; ante error loguear {name, message, stack} y relanzar.

Collaborators:
    - Sanitizer (UserCreateDataSanitizer)
    - DataValidator (UserCreateDataValidator)
    - HashProvider
    - UserRepository.create
    - LoggerProvider
===============================================================================
"""

from __future__ import annotations

from typing import Any

from ....domain.entities import UserCreateData
from ....domain.repositories import UserRepository
from ....domain.services import DataValidator, HashProvider, LoggerProvider, Sanitizer
from ..log_context import describe_error, log_context, with_metadata


class CreateUserUseCase:
    """Orquesta sanitize → validate → hash → persist."""

    def __init__(
        self,
        *,
        repository: UserRepository,
        sanitizer: Sanitizer,
        validator: DataValidator,
        hash_provider: HashProvider,
        logger: LoggerProvider,
    ) -> None:
        self._users = repository
        self._sanitizer = sanitizer
        self._validator = validator
        self._hasher = hash_provider
        self._logger = logger

    def execute(self, data: Any) -> None:
        context = log_context(type(self).__name__, "execute")

        try:
            self._logger.debug("Iniciando processo de criação de usuário", context)

            # -----------------------------------------------------------------
            # 1) Sanitizar
            # -----------------------------------------------------------------
            sanitized = self._sanitizer.sanitize(data)
            context = with_metadata(context, userEmail=sanitized.get("email"))
            self._logger.debug(
                "Dados sanitizados com sucesso",
                with_metadata(context, sanitizedData=sanitized),
            )

            # -----------------------------------------------------------------
            # 2) Validar
            # -----------------------------------------------------------------
            self._validator.validate(sanitized)
            self._logger.debug("Dados validados com sucesso", context)

            # -----------------------------------------------------------------
            # 3) Persistir con password hasheado
            # -----------------------------------------------------------------
            self._users.create(
                UserCreateData(
                    name=sanitized["name"],
                    email=sanitized["email"],
                    phone=sanitized["phone"],
                    birthdate=sanitized["birthdate"],
                    password=self._hasher.hash(sanitized["password"]),
                )
            )

            self._logger.info("Usuário criado com sucesso", context)
        except Exception as exc:
            self._logger.error(
                "Erro ao criar usuário",
                with_metadata(context, error=describe_error(exc)),
            )
            raise
