"""Use cases checking a stored client's CPF and CEP."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from clients_api.domain.clients import is_valid_cpf
from clients_api.repositories.client_repository import ClientRepository
from clients_api.services.cep_client import CepClient, CepLookupError


@dataclass
class TaxIdCheck:
    valid: bool

    @property
    def message(self) -> str:
        return "valid" if self.valid else "invalid"


@dataclass
class PostalCodeCheck:
    postal_code: str
    address: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.address is not None


class ValidationService:
    """Reads a client from the repository and delegates to the external checkers."""

    def __init__(self, repository: ClientRepository, cep_client: CepClient) -> None:
        self.repository = repository
        self.cep_client = cep_client

    def check_tax_id(self, client_id: int) -> Optional[TaxIdCheck]:
        client = self.repository.get_by_id(client_id)
        if client is None:
            return None
        return TaxIdCheck(valid=is_valid_cpf(client.tax_id))

    async def check_postal_code(self, client_id: int) -> Optional[PostalCodeCheck]:
        client = self.repository.get_by_id(client_id)
        if client is None:
            return None
        try:
            address = await self.cep_client.lookup(client.postal_code)
        except CepLookupError as exc:
            return PostalCodeCheck(postal_code=client.postal_code, error=exc.message)
        return PostalCodeCheck(postal_code=client.postal_code, address=address)
