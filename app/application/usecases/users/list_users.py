"""
USE CASE: List Users

CRC:
  Class: ListUsersUseCase
  Responsibilities:
    - Devolver todos los usuarios sin password (sin paginación).
    - Loguear inicio/éxito/error; relanzar errores sin envolver.
  Collaborators:
    - UserRepository.list
    - LoggerProvider
"""

from __future__ import annotations

from ....domain.entities import UserMapped
from ....domain.repositories import UserRepository
from ....domain.services import LoggerProvider
from ..log_context import describe_error, log_context, with_metadata


class ListUsersUseCase:
    def __init__(self, *, repository: UserRepository, logger: LoggerProvider) -> None:
        self._users = repository
        self._logger = logger

    def execute(self) -> list[UserMapped]:
        context = log_context(type(self).__name__, "execute")

        try:
            self._logger.debug("Iniciando processo de listagem de usuários", context)
            users = self._users.list()
            self._logger.info(
                "Usuários listados com sucesso",
                with_metadata(context, total=len(users)),
            )
            return users
        except Exception as exc:
            self._logger.error(
                "Erro ao listar usuários",
                with_metadata(context, error=describe_error(exc)),
            )
            raise
