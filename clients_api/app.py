import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from clients_api.core.config import Settings, get_settings
from clients_api.core.error_handlers import register_error_handlers
from clients_api.core.observability import RequestLogMiddleware, setup_logging
from clients_api.repositories.client_repository import ClientRepository
from clients_api.routers import users as users_router
from clients_api.services.cep_client import CepClient
from clients_api.services.validation_service import ValidationService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, cep_client: Optional[CepClient] = None) -> FastAPI:
    """Factory compatível com uvicorn/gunicorn."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # O repositorio precisa estar carregado antes da primeira requisicao
        setup_logging(settings.log_level)
        repository = ClientRepository(settings.data_file)
        repository.init()
        client = cep_client or CepClient(settings.cep_providers, timeout=settings.cep_timeout_seconds)
        app.state.repository = repository
        app.state.validation_service = ValidationService(repository, client)
        logger.info("Servidor rodando na porta %s", settings.port)
        yield
        logger.info("Servidor encerrado")

    app = FastAPI(title="Clients API", lifespan=lifespan)
    app.add_middleware(RequestLogMiddleware)
    register_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Servidor Python rodando"

    app.include_router(users_router.router)
    return app


app = create_app()
