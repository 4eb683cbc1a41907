"""
===============================================================================
MÓDULO: Logger estructurado (JSON) con contexto de request
===============================================================================

Objetivo
--------
Una línea JSON por evento, con:
- contexto del request (request_id / http_method / http_path)
- campos extra del servicio (service / method / metadata)
- secretos redactados aunque vengan anidados en metadata

Colaboradores:
  - app/context.py (ContextVars)
  - crosscutting/config.py (nivel y formato)
  - infrastructure/providers/logger.py (adapter para los casos de uso)
===============================================================================
"""

from __future__ import annotations

import json
import logging
import os
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

# R: Atributos estándar de un LogRecord; todo lo demás es "extra".
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {
    "message",
    "asctime",
    "taskName",
}

REDACTED = "***REDACTADO***"
TRUNCATED = "***TRUNCADO***"

SENSITIVE_KEYS = frozenset(
    {
        "password",
        "passwd",
        "secret",
        "token",
        "authorization",
        "access_token",
        "accesstoken",
        "jwt_secret",
        "private_key",
        "credential",
    }
)


def redact(value: Any, *, key: str | None = None, depth: int = 0) -> Any:
    """
    Copia JSON-safe de `value` con claves sensibles redactadas.

    - Recorre dicts y listas hasta 6 niveles.
    - Strings > 8000 caracteres se recortan.
    """
    if key is not None and key.lower() in SENSITIVE_KEYS:
        return REDACTED
    if depth > 6:
        return TRUNCATED

    if isinstance(value, str):
        return value if len(value) <= 8_000 else value[:8_000] + "…(truncado)"
    if isinstance(value, (bytes, bytearray)):
        return f"<bytes {len(value)}B>"
    if isinstance(value, dict):
        return {str(k): redact(v, key=str(k), depth=depth + 1) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [redact(v, key=key, depth=depth + 1) for v in value]
    if value is None or isinstance(value, (bool, int, float)):
        return value
    return str(value)


class JSONFormatter(logging.Formatter):
    """LogRecord -> JSON (contexto de request + extras redactados + excepción)."""

    def format(self, record: logging.LogRecord) -> str:
        from ..context import get_context_dict

        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "pid": os.getpid(),
            **get_context_dict(),
        }

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                payload[key] = redact(value, key=key)

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc, tb = record.exc_info
            payload["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc),
                "stacktrace": traceback.format_exception(exc_type, exc, tb),
            }

        return json.dumps(payload, ensure_ascii=False, default=str, separators=(",", ":"))


def setup_logger(name: str = "users-api") -> logging.Logger:
    """
    Crea y configura el logger global (idempotente ante reimports).

    Si Settings no es válido (ej. falta JWT_SECRET) arranca con INFO + JSON:
    el error de configuración se reporta al iniciar la app (lifespan).
    """
    from pydantic import ValidationError

    from .config import get_settings

    level, as_json = "INFO", True
    try:
        settings = get_settings()
    except ValidationError:
        settings = None
    if settings is not None:
        level = (settings.log_level or "INFO").upper()
        as_json = settings.log_json

    log = logging.getLogger(name)
    log.setLevel(getattr(logging, level, logging.INFO))

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            JSONFormatter() if as_json else logging.Formatter("%(levelname)s %(message)s")
        )
        log.addHandler(handler)

    return log


logger = setup_logger()
