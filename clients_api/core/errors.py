"""Error hierarchy translated into JSON responses by the global handlers."""

from __future__ import annotations


class AppError(Exception):
    """Base error carrying the HTTP status and a user-facing message."""

    def __init__(self, message: str, status_code: int = 400, code: str = "error"):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    def to_response(self) -> dict:
        return {"status": "error", "message": self.message}


class ValidationError(AppError):
    """Raised when a payload breaks the field contract."""

    def __init__(self, errors: dict[str, list[str]], message: str = "Dados da requisicao invalidos"):
        super().__init__(message, status_code=400, code="validation_error")
        self.errors = errors

    def to_response(self) -> dict:
        body = super().to_response()
        body["errors"] = self.errors
        return body


class NotFoundError(AppError):
    def __init__(self, message: str = "Usuario nao encontrado"):
        super().__init__(message, status_code=404, code="not_found")


class UpstreamLookupError(AppError):
    """Raised when the CEP lookup service rejects or fails to resolve a code."""

    def __init__(self, postal_code: str, error: str, message: str = "CEP do usuario e invalido"):
        super().__init__(message, status_code=400, code="upstream_lookup")
        self.postal_code = postal_code
        self.error = error

    def to_response(self) -> dict:
        body = super().to_response()
        body["postalCode"] = self.postal_code
        body["error"] = self.error
        return body


class InternalError(AppError):
    def __init__(self, message: str = "Erro interno do servidor"):
        super().__init__(message, status_code=500, code="internal_error")
