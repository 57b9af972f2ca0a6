"""HTTP client resolving a CEP to an address through public lookup services."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Sequence

import httpx

from clients_api.domain.clients import is_valid_postal_code, only_digits

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "CEP nao encontrado"
INVALID_MESSAGE = "CEP deve conter exatamente 8 caracteres"
UNAVAILABLE_MESSAGE = "Servico de consulta de CEP indisponivel"


class CepLookupError(Exception):
    def __init__(self, message: str, cep: str = ""):
        super().__init__(message)
        self.message = message
        self.cep = cep


class CepNotFound(CepLookupError):
    """A provider answered but does not know the CEP."""


def _from_brasilapi(cep: str, data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "cep": only_digits(data.get("cep")) or cep,
        "state": data.get("state") or "",
        "city": data.get("city") or "",
        "neighborhood": data.get("neighborhood") or "",
        "street": data.get("street") or "",
        "service": "brasilapi",
    }


def _from_viacep(cep: str, data: Dict[str, Any]) -> Dict[str, Any]:
    # ViaCEP answers 200 with {"erro": true} for unknown codes
    if data.get("erro"):
        raise CepNotFound(NOT_FOUND_MESSAGE, cep)
    return {
        "cep": only_digits(data.get("cep")) or cep,
        "state": data.get("uf") or "",
        "city": data.get("localidade") or "",
        "neighborhood": data.get("bairro") or "",
        "street": data.get("logradouro") or "",
        "service": "viacep",
    }


PROVIDERS: Dict[str, tuple[str, Callable[[str, Dict[str, Any]], Dict[str, Any]]]] = {
    "brasilapi": ("https://brasilapi.com.br/api/cep/v1/{cep}", _from_brasilapi),
    "viacep": ("https://viacep.com.br/ws/{cep}/json/", _from_viacep),
}


class CepClient:
    """Tries each configured provider once, in order, until one resolves the CEP."""

    def __init__(
        self,
        providers: Sequence[str] = ("brasilapi", "viacep"),
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        unknown = [p for p in providers if p not in PROVIDERS]
        if unknown:
            raise ValueError(f"Provedores de CEP desconhecidos: {', '.join(unknown)}")
        if not providers:
            raise ValueError("Nenhum provedor de CEP configurado")
        self.providers = tuple(providers)
        self.timeout = timeout
        self._transport = transport

    async def _query(self, client: httpx.AsyncClient, name: str, cep: str) -> Dict[str, Any]:
        url, parse = PROVIDERS[name]
        response = await client.get(url.format(cep=cep))
        if response.status_code in (400, 404):
            raise CepNotFound(NOT_FOUND_MESSAGE, cep)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Resposta inesperada de {name}: {type(data).__name__}")
        return parse(cep, data)

    async def lookup(self, cep: str) -> Dict[str, Any]:
        """Resolve cep to {cep, state, city, neighborhood, street, service}."""
        digits = only_digits(cep)
        if not is_valid_postal_code(digits):
            raise CepLookupError(INVALID_MESSAGE, cep or "")

        not_found = False
        last_error = UNAVAILABLE_MESSAGE
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for name in self.providers:
                try:
                    return await self._query(client, name, digits)
                except CepNotFound:
                    not_found = True
                    logger.warning("CEP %s nao encontrado em %s", digits, name)
                except (httpx.HTTPError, ValueError) as exc:
                    last_error = f"{UNAVAILABLE_MESSAGE}: {name}"
                    logger.warning("Falha ao consultar CEP %s em %s: %s", digits, name, exc)
        if not_found:
            raise CepNotFound(NOT_FOUND_MESSAGE, digits)
        raise CepLookupError(last_error, digits)
