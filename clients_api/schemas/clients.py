"""Client record models and the create/update field contracts."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clients_api.domain.clients import (
    NAME_MIN_LENGTH,
    is_valid_cpf,
    is_valid_email,
    is_valid_postal_code,
)

NAME_MESSAGE = f"Nome deve ter ao menos {NAME_MIN_LENGTH} letras"
EMAIL_MESSAGE = "Formato de email invalido"
CPF_MESSAGE = "CPF invalido"
CEP_MESSAGE = "CEP deve conter 8 digitos"


class _ClientFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("name", check_fields=False)
    @classmethod
    def _check_name(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) < NAME_MIN_LENGTH:
            raise ValueError(NAME_MESSAGE)
        return value

    @field_validator("email", check_fields=False)
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_valid_email(value):
            raise ValueError(EMAIL_MESSAGE)
        return value

    @field_validator("tax_id", check_fields=False)
    @classmethod
    def _check_tax_id(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_valid_cpf(value):
            raise ValueError(CPF_MESSAGE)
        return value

    @field_validator("postal_code", check_fields=False)
    @classmethod
    def _check_postal_code(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_valid_postal_code(value):
            raise ValueError(CEP_MESSAGE)
        return value

    def to_json(self) -> dict:
        """Dump with the public camelCase keys, leaving absent fields out."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ClientCreate(_ClientFields):
    name: str
    email: str
    tax_id: str = Field(alias="taxId")
    postal_code: str = Field(alias="postalCode")
    registry_id: Optional[str] = Field(default=None, alias="registryId")
    street: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None


class ClientUpdate(_ClientFields):
    name: Optional[str] = None
    email: Optional[str] = None
    tax_id: Optional[str] = Field(default=None, alias="taxId")
    postal_code: Optional[str] = Field(default=None, alias="postalCode")
    registry_id: Optional[str] = Field(default=None, alias="registryId")
    street: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None

    def provided_fields(self) -> dict:
        # null counts as "not provided"
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ClientRecord(BaseModel):
    """Stored client. Field rules are enforced upstream by the contracts."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    name: str
    email: str
    tax_id: str = Field(alias="taxId")
    postal_code: str = Field(alias="postalCode")
    registry_id: Optional[str] = Field(default=None, alias="registryId")
    street: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def merge_update(record: ClientRecord, patch: ClientUpdate) -> ClientRecord:
    """Overwrite only the fields present in patch; id never changes."""
    return record.model_copy(update=patch.provided_fields())
