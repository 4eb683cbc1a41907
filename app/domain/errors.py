"""
===============================================================================
TARJETA CRC — domain/errors.py (Taxonomía de errores de aplicación)
===============================================================================

Responsabilidades:
  - Definir errores tipados que cargan su status HTTP.
  - Construir mensajes estables (en portugués, contrato con los clientes).
  - Exponer `name` para que logs y respuestas identifiquen el tipo.

Colaboradores:
  - application.validators / application.usecases: lanzan estos errores.
  - interfaces.api.http.helpers.handle_error: los traduce a respuestas HTTP.

Reglas:
  - El dominio no conoce FastAPI: solo enteros de status.
  - Los parámetros se capitalizan en la primera letra (Id, Token, Email/Senha).
===============================================================================
"""

from __future__ import annotations


def _capitalize(value: str) -> str:
    """R: Primera letra en mayúscula, el resto intacto ("email/senha" -> "Email/senha")."""
    value = (value or "").strip()
    return value[:1].upper() + value[1:]


class ApplicationError(Exception):
    """Base de los errores esperados del flujo (validación, auth, existencia)."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def name(self) -> str:
        return type(self).__name__


class MissingParamError(ApplicationError):
    """Campo obligatorio o cuerpo de la request ausente."""

    status_code = 400

    def __init__(self, param: str) -> None:
        self.param = param
        super().__init__(f"Parâmetro obrigatório não informado: {param}")


class InvalidParamError(ApplicationError):
    """Campo presente pero con formato o valor inválido."""

    status_code = 400

    def __init__(self, param: str, reason: str | None = None) -> None:
        self.param = param
        self.reason = reason
        message = f"Parâmetro inválido: {_capitalize(param)}."
        if reason:
            message = f"{message} {_capitalize(reason)}."
        super().__init__(message)


class InvalidCredentialsError(ApplicationError):
    """Par email/senha que no autentica (sin distinguir cuál falló)."""

    status_code = 401

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        message = "Credenciais inválidas: Email/Senha."
        if reason:
            message = f"{message} {_capitalize(reason)}."
        super().__init__(message)


class UnregisteredParamError(ApplicationError):
    """El id/entidad referenciada no existe."""

    status_code = 404

    def __init__(self, param: str) -> None:
        self.param = param
        super().__init__(
            f"Não foram encontrados registros para esse(a) {_capitalize(param)}."
        )


class DuplicateResourceError(ApplicationError):
    """Restricción de unicidad violada (ej. email ya registrado)."""

    status_code = 409

    def __init__(self, param: str) -> None:
        self.param = param
        super().__init__(f"Já existe um registro com esse(a) {_capitalize(param)}.")


class ServerError(ApplicationError):
    """Falla inesperada; envuelve el mensaje del error original."""

    status_code = 500

    def __init__(self, error: BaseException | str | None = None) -> None:
        if isinstance(error, ApplicationError):
            detail = error.message
        elif isinstance(error, BaseException):
            detail = str(error)
        else:
            detail = error or ""
        self.original_error = error if isinstance(error, BaseException) else None
        super().__init__(f"Erro inesperado do servidor. {detail}".rstrip())


__all__ = [
    "ApplicationError",
    "MissingParamError",
    "InvalidParamError",
    "InvalidCredentialsError",
    "UnregisteredParamError",
    "DuplicateResourceError",
    "ServerError",
]
