"""
===============================================================================
TARJETA CRC — infrastructure/providers/logger.py
===============================================================================

Responsabilidades:
  - Adaptar el logger JSON global al puerto LoggerProvider.
  - Volcar el contexto {service, method, metadata} como campos extra.

Colaboradores:
  - crosscutting.logger (JSONFormatter + redacción de secretos)
  - application.usecases.* (consumidores)
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ...crosscutting.logger import logger as default_logger

_CONTEXT_KEYS = ("service", "method", "metadata")


class StructuredLoggerProvider:
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or default_logger

    @staticmethod
    def _extra(context: Mapping[str, Any] | None) -> dict[str, Any]:
        if not context:
            return {}
        return {key: context[key] for key in _CONTEXT_KEYS if key in context}

    def debug(self, message: str, context: Mapping[str, Any] | None = None) -> None:
        self._logger.debug(message, extra=self._extra(context))

    def info(self, message: str, context: Mapping[str, Any] | None = None) -> None:
        self._logger.info(message, extra=self._extra(context))

    def warning(self, message: str, context: Mapping[str, Any] | None = None) -> None:
        self._logger.warning(message, extra=self._extra(context))

    def error(self, message: str, context: Mapping[str, Any] | None = None) -> None:
        self._logger.error(message, extra=self._extra(context))
