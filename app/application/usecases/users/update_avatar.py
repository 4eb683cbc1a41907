"""
===============================================================================
USE CASE: Update User Avatar
===============================================================================

CRC CARD
-------------------------------------------------------------------------------
Class:
    UpdateUserAvatarUseCase

Responsibilities:
    - Sanitizar {id, avatarUrl} (trim; URL en minúsculas).
    - Validar presencia, formato del id y existencia del usuario.
    - Persistir la nueva URL vía repositorio.
    - Loguear cada paso; ante error loguear {name, message, stack} y relanzar.

Collaborators:
    - Sanitizer (UserAvatarDataSanitizer)
    - DataValidator (UserAvatarDataValidator)
    - UserRepository.update_avatar
    - LoggerProvider
===============================================================================
"""

from __future__ import annotations

from typing import Any

from ....domain.entities import UserAvatarData
from ....domain.repositories import UserRepository
from ....domain.services import DataValidator, LoggerProvider, Sanitizer
from ..log_context import describe_error, log_context, with_metadata


class UpdateUserAvatarUseCase:
    def __init__(
        self,
        *,
        repository: UserRepository,
        sanitizer: Sanitizer,
        validator: DataValidator,
        logger: LoggerProvider,
    ) -> None:
        self._users = repository
        self._sanitizer = sanitizer
        self._validator = validator
        self._logger = logger

    def execute(self, data: Any) -> None:
        context = log_context(type(self).__name__, "execute")

        try:
            self._logger.debug(
                "Iniciando processo de atualização do avatar do usuário", context
            )

            sanitized = self._sanitizer.sanitize(data)
            context = with_metadata(context, userId=sanitized.get("id"))
            self._logger.debug(
                "Dados sanitizados com sucesso",
                with_metadata(context, sanitizedData=sanitized),
            )

            self._validator.validate(sanitized)
            self._logger.debug("Dados validados com sucesso", context)

            self._users.update_avatar(
                UserAvatarData(id=sanitized["id"], avatar_url=sanitized["avatarUrl"])
            )

            self._logger.info("Avatar do usuário atualizado com sucesso", context)
        except Exception as exc:
            self._logger.error(
                "Erro ao atualizar o avatar do usuário",
                with_metadata(context, error=describe_error(exc)),
            )
            raise
