"""
Name: Use Case Log Context helpers

Responsibilities:
  - Build the {service, method, metadata} context every use case logs with
  - Describe a raised error as {name, message, stack} for error logs

Collaborators:
  - domain.services.LoggerProvider (consumer of the context)
  - application.usecases.* (callers)
"""

from __future__ import annotations

import traceback
from typing import Any


def log_context(service: str, method: str, **metadata: Any) -> dict[str, Any]:
    return {"service": service, "method": method, "metadata": dict(metadata)}


def with_metadata(context: dict[str, Any], **metadata: Any) -> dict[str, Any]:
    """R: Copy of the context with extra metadata keys (original untouched)."""
    return {**context, "metadata": {**context.get("metadata", {}), **metadata}}


def describe_error(error: BaseException) -> dict[str, str]:
    return {
        "name": getattr(error, "name", type(error).__name__),
        "message": getattr(error, "message", str(error)),
        "stack": "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        ),
    }
