from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest

# Garante que o pacote clients_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from clients_api.core.config import Settings  # noqa: E402
from clients_api.services.cep_client import CepClient  # noqa: E402

VALID_CPF = "52998224725"
OTHER_VALID_CPF = "11144477735"

SE_ADDRESS = {
    "cep": "01001000",
    "state": "SP",
    "city": "São Paulo",
    "neighborhood": "Sé",
    "street": "Praça da Sé",
    "service": "open-cep",
}


@pytest.fixture()
def data_file(tmp_path) -> Path:
    return tmp_path / "data" / "users.json"


@pytest.fixture()
def settings(data_file) -> Settings:
    return Settings(
        app_env="test",
        host="127.0.0.1",
        port=3000,
        data_file=data_file,
        cep_providers=("brasilapi", "viacep"),
        cep_timeout_seconds=1.0,
        log_level="INFO",
    )


def brasilapi_handler(request: httpx.Request) -> httpx.Response:
    """Fake BrasilAPI that only knows 01001000; ViaCEP is never reached for it."""
    if request.url.host == "brasilapi.com.br":
        if request.url.path.endswith("/01001000"):
            return httpx.Response(200, json=SE_ADDRESS)
        return httpx.Response(404, json={"message": "Todos os serviços de CEP retornaram erro."})
    if request.url.host == "viacep.com.br":
        return httpx.Response(200, json={"erro": True})
    return httpx.Response(500)


@pytest.fixture()
def cep_client() -> CepClient:
    return CepClient(("brasilapi", "viacep"), timeout=1.0, transport=httpx.MockTransport(brasilapi_handler))
