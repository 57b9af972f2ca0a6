"""Domain helpers for client field rules (CPF, CEP, e-mail)."""
from __future__ import annotations

import re

from email_validator import EmailNotValidError, validate_email
from validate_docbr import CPF

CEP_PATTERN = re.compile(r"[0-9]{8}")
NAME_MIN_LENGTH = 3

_cpf = CPF()


def only_digits(value: str | None) -> str:
    return re.sub(r"[^0-9]", "", value or "")


def is_valid_cpf(value: str | None) -> bool:
    """Return True when the CPF passes the check-digit rule."""
    if not value:
        return False
    return _cpf.validate(value)


def generate_cpf() -> str:
    """Random checksum-valid CPF, digits only."""
    return _cpf.generate(mask=False)


def is_valid_postal_code(value: str | None) -> bool:
    """Return True when the CEP is exactly eight digits."""
    if not value:
        return False
    return bool(CEP_PATTERN.fullmatch(value))


def is_valid_email(value: str | None) -> bool:
    if not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True
