"""File-backed repository owning the ordered collection of client records."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from clients_api.domain.clients import generate_cpf
from clients_api.repositories import json_storage
from clients_api.schemas.clients import ClientCreate, ClientRecord, ClientUpdate, merge_update

logger = logging.getLogger(__name__)


def seed_records() -> list[ClientRecord]:
    return [
        ClientRecord(
            id=1, email="felipe@example.com", name="Felipe", tax_id=generate_cpf(), registry_id="111111111",
            postal_code="11111111", street="Rua um", neighborhood="Bairro um", city="Cidade um", state="Estado um",
        ),
        ClientRecord(
            id=2, email="maria@example.com", name="Maria", tax_id=generate_cpf(), registry_id="222222222",
            postal_code="22222222", street="Rua dois", neighborhood="Bairro dois", city="Cidade dois", state="Estado dois",
        ),
        ClientRecord(
            id=3, email="andre@example.com", name="André", tax_id=generate_cpf(), registry_id="333333333",
            postal_code="33333333", street="Rua três", neighborhood="Bairro três", city="Cidade três", state="Estado três",
        ),
    ]


class ClientRepository:
    """CRUD over an in-memory list, snapshotted to a JSON file on every mutation."""

    def __init__(self, data_file: Path) -> None:
        self.data_file = Path(data_file)
        self._clients: Optional[list[ClientRecord]] = None

    @property
    def clients(self) -> list[ClientRecord]:
        if self._clients is None:
            raise RuntimeError("ClientRepository nao inicializado; chame init() antes de servir requisicoes")
        return self._clients

    def init(self) -> None:
        """Load the stored collection, seeding defaults when it cannot be read."""
        try:
            rows = json_storage.load(self.data_file)
            self._clients = [ClientRecord.model_validate(row) for row in rows]
        except (OSError, ValueError, PydanticValidationError) as exc:
            logger.warning("Nao foi possivel ler %s (%s); gravando clientes de exemplo", self.data_file, exc)
            self._clients = seed_records()
            self._save()
        else:
            logger.info("%d clientes carregados de %s", len(self._clients), self.data_file)

    def _save(self) -> None:
        json_storage.save(self.data_file, [c.to_json() for c in self.clients])

    def _index_of(self, client_id: int) -> int:
        for idx, client in enumerate(self.clients):
            if client.id == client_id:
                return idx
        return -1

    # -------------------------- reads --------------------------
    def get_all(self) -> list[ClientRecord]:
        return list(self.clients)

    def get_by_id(self, client_id: int) -> Optional[ClientRecord]:
        idx = self._index_of(client_id)
        return self.clients[idx] if idx >= 0 else None

    # -------------------------- writes --------------------------
    def next_id(self) -> int:
        return max((c.id for c in self.clients), default=0) + 1

    def create(self, data: ClientCreate) -> ClientRecord:
        record = ClientRecord(id=self.next_id(), **data.model_dump())
        self.clients.append(record)
        self._save()
        return record

    def update(self, client_id: int, patch: ClientUpdate) -> Optional[ClientRecord]:
        idx = self._index_of(client_id)
        if idx < 0:
            return None
        updated = merge_update(self.clients[idx], patch)
        self.clients[idx] = updated
        self._save()
        return updated

    def delete(self, client_id: int) -> Optional[ClientRecord]:
        idx = self._index_of(client_id)
        if idx < 0:
            return None
        removed = self.clients.pop(idx)
        self._save()
        return removed
