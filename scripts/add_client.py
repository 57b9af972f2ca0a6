#!/usr/bin/env python3
"""
Cadastrar um novo cliente diretamente no arquivo JSON.

Uso:
  python scripts/add_client.py --name "Ana Silva" --email ana@example.com --cpf 52998224725 --cep 01001000 \
      [--rg 123456789] [--street "Praca da Se"] [--neighborhood Se] [--city "Sao Paulo"] [--state SP]
"""
from __future__ import annotations

import argparse
import sys

from clients_api.core.config import get_settings
from clients_api.repositories.client_repository import ClientRepository
from clients_api.schemas.clients import ClientCreate
from clients_api.services.schema_validator import validate_payload


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Cadastrar cliente no arquivo JSON")
    ap.add_argument("--name", required=True, help="Nome (ao menos 3 letras)")
    ap.add_argument("--email", required=True, help="Email do cliente")
    ap.add_argument("--cpf", required=True, help="CPF com digitos verificadores validos")
    ap.add_argument("--cep", required=True, help="CEP com 8 digitos")
    ap.add_argument("--rg", help="RG opcional")
    ap.add_argument("--street", help="Logradouro")
    ap.add_argument("--neighborhood", help="Bairro")
    ap.add_argument("--city", help="Cidade")
    ap.add_argument("--state", help="Estado")
    ap.add_argument("--file", default=str(settings.data_file), help=f"Arquivo de dados (default: {settings.data_file})")
    args = ap.parse_args()

    payload = {
        "name": args.name,
        "email": args.email,
        "taxId": args.cpf,
        "postalCode": args.cep,
        "registryId": args.rg,
        "street": args.street,
        "neighborhood": args.neighborhood,
        "city": args.city,
        "state": args.state,
    }
    outcome = validate_payload(ClientCreate, {k: v for k, v in payload.items() if v is not None})
    if not outcome.ok:
        for field, messages in outcome.errors.items():
            sys.stderr.write(f"{field}: {'; '.join(messages)}\n")
        raise SystemExit("Dados invalidos")

    repo = ClientRepository(args.file)
    repo.init()
    client = repo.create(outcome.value)
    print("OK: cliente cadastrado")
    print(f"  ID: {client.id}")
    print(f"  Nome: {client.name}")
    print(f"  Arquivo: {repo.data_file}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
