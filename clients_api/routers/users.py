"""/users routes: CRUD over the client repository plus the CPF and CEP checks."""
from __future__ import annotations

import re
from typing import Any

from fastapi import APIRouter, Body, Request

from clients_api.core.errors import NotFoundError, UpstreamLookupError, ValidationError
from clients_api.repositories.client_repository import ClientRepository
from clients_api.schemas.clients import ClientCreate, ClientUpdate
from clients_api.services.schema_validator import validate_payload
from clients_api.services.validation_service import ValidationService

router = APIRouter(prefix="/users", tags=["users"])

ID_PATTERN = re.compile(r"[0-9]+")


def _parse_id(raw: str) -> int:
    # ids que nao sao inteiros nunca casam com um cliente
    if not ID_PATTERN.fullmatch(raw or ""):
        raise NotFoundError()
    return int(raw)


def _get_repository(request: Request) -> ClientRepository:
    repo = getattr(getattr(request.app, "state", None), "repository", None)
    if not repo:
        raise RuntimeError("ClientRepository nao configurado")
    return repo


def _get_validation_service(request: Request) -> ValidationService:
    svc = getattr(getattr(request.app, "state", None), "validation_service", None)
    if not svc:
        raise RuntimeError("ValidationService nao configurado")
    return svc


@router.get("/isCPF/{client_id}")
async def is_cpf(client_id: str, request: Request):
    check = _get_validation_service(request).check_tax_id(_parse_id(client_id))
    if check is None:
        raise NotFoundError()
    return {"message": check.message}


@router.get("/isCEP/{client_id}")
async def is_cep(client_id: str, request: Request):
    check = await _get_validation_service(request).check_postal_code(_parse_id(client_id))
    if check is None:
        raise NotFoundError()
    if not check.ok:
        raise UpstreamLookupError(check.postal_code, check.error or "")
    return {"message": "CEP do usuario e valido", "postalCode": check.postal_code, "address": check.address}


@router.get("")
async def list_users(request: Request):
    return [client.to_json() for client in _get_repository(request).get_all()]


@router.get("/{client_id}")
async def get_user(client_id: str, request: Request):
    client = _get_repository(request).get_by_id(_parse_id(client_id))
    if client is None:
        raise NotFoundError()
    return client.to_json()


@router.post("", status_code=201)
async def create_user(request: Request, payload: Any = Body(None)):
    outcome = validate_payload(ClientCreate, payload)
    if not outcome.ok:
        raise ValidationError(outcome.errors)
    return _get_repository(request).create(outcome.value).to_json()


@router.put("/{client_id}")
async def update_user(client_id: str, request: Request, payload: Any = Body(None)):
    outcome = validate_payload(ClientUpdate, payload)
    if not outcome.ok:
        raise ValidationError(outcome.errors)
    updated = _get_repository(request).update(_parse_id(client_id), outcome.value)
    if updated is None:
        raise NotFoundError()
    return updated.to_json()


@router.delete("/{client_id}")
async def delete_user(client_id: str, request: Request):
    removed = _get_repository(request).delete(_parse_id(client_id))
    if removed is None:
        raise NotFoundError()
    return removed.to_json()
