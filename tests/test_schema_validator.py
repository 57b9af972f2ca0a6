from __future__ import annotations

from clients_api.schemas.clients import ClientCreate, ClientRecord, ClientUpdate, merge_update
from clients_api.services.schema_validator import validate_payload
from conftest import VALID_CPF


def test_invalid_create_payload_reports_every_field():
    outcome = validate_payload(ClientCreate, {"name": "Al", "email": "bad", "taxId": "000", "postalCode": "123"})

    assert not outcome.ok
    assert outcome.value is None
    assert outcome.errors == {
        "name": ["Nome deve ter ao menos 3 letras"],
        "email": ["Formato de email invalido"],
        "taxId": ["CPF invalido"],
        "postalCode": ["CEP deve conter 8 digitos"],
    }


def test_missing_required_fields():
    outcome = validate_payload(ClientCreate, {"name": "Ana Silva"})
    assert set(outcome.errors) == {"email", "taxId", "postalCode"}
    assert outcome.errors["email"] == ["Campo obrigatorio"]


def test_postal_code_must_be_digits():
    outcome = validate_payload(
        ClientCreate,
        {"name": "Ana Silva", "email": "ana@example.com", "taxId": VALID_CPF, "postalCode": "0100100a"},
    )
    assert outcome.errors == {"postalCode": ["CEP deve conter 8 digitos"]}


def test_valid_create_payload_ignores_client_id():
    outcome = validate_payload(
        ClientCreate,
        {"id": 42, "name": "Ana Silva", "email": "ana@example.com", "taxId": VALID_CPF, "postalCode": "01001000", "city": "São Paulo"},
    )
    assert outcome.ok
    assert outcome.value.to_json() == {
        "name": "Ana Silva",
        "email": "ana@example.com",
        "taxId": VALID_CPF,
        "postalCode": "01001000",
        "city": "São Paulo",
    }


def test_non_object_payload_is_rejected():
    outcome = validate_payload(ClientCreate, ["not", "an", "object"])
    assert outcome.errors == {"body": ["Corpo da requisicao deve ser um objeto JSON"]}
    assert validate_payload(ClientUpdate, None).errors == {"body": ["Corpo da requisicao deve ser um objeto JSON"]}


def test_update_contract_makes_every_field_optional():
    assert validate_payload(ClientUpdate, {}).ok
    outcome = validate_payload(ClientUpdate, {"postalCode": "123", "street": "Rua nova"})
    assert outcome.errors == {"postalCode": ["CEP deve conter 8 digitos"]}


def test_text_fields_must_be_strings():
    outcome = validate_payload(ClientUpdate, {"city": 123})
    assert list(outcome.errors) == ["city"]


def test_merge_update_keeps_id_and_unset_fields():
    record = ClientRecord(id=5, name="Ana Silva", email="ana@example.com", tax_id=VALID_CPF, postal_code="01001000", city="Santos")
    merged = merge_update(record, ClientUpdate.model_validate({"name": "Ana Souza"}))
    assert merged.id == 5
    assert merged.name == "Ana Souza"
    assert merged.city == "Santos"
    assert record.name == "Ana Silva"


def test_postal_code_rejects_non_ascii_digits():
    outcome = validate_payload(
        ClientCreate,
        {"name": "Ana Silva", "email": "ana@example.com", "taxId": VALID_CPF, "postalCode": "٠١٠٠١٠٠٠"},
    )
    assert outcome.errors == {"postalCode": ["CEP deve conter 8 digitos"]}
