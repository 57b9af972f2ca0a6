"""Global exception handlers turning errors into JSON responses.

AppError subclasses carry their own status and body; request parsing errors are
reported in the same field-level shape as payload validation; anything else is
logged and answered with a generic 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from clients_api.core.errors import AppError, InternalError, ValidationError
from clients_api.services.schema_validator import field_errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s em %s: %s", exc.code, request.url.path, exc.message)
        else:
            logger.info("%s em %s: %s", exc.code, request.url.path, exc.message)
        return JSONResponse(exc.to_response(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(field_errors(list(exc.errors())))
        logger.info("Requisicao invalida em %s: %s", request.url.path, error.errors)
        return JSONResponse(error.to_response(), status_code=error.status_code)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Erro inesperado em %s %s", request.method, request.url.path)
        error = InternalError()
        return JSONResponse(error.to_response(), status_code=error.status_code)
