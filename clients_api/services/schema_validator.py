"""Validate raw payloads against a contract and collect field-level errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

BODY_FIELD = "body"
BODY_MESSAGE = "Corpo da requisicao deve ser um objeto JSON"
MISSING_MESSAGE = "Campo obrigatorio"


@dataclass
class ValidationOutcome(Generic[ModelT]):
    value: Optional[ModelT] = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def error_message(error: dict) -> str:
    """Turn a single pydantic error entry into the message shown to clients."""
    kind = error.get("type")
    if kind == "missing":
        return MISSING_MESSAGE
    if kind == "value_error":
        ctx = error.get("ctx") or {}
        if ctx.get("error") is not None:
            return str(ctx["error"])
    return error.get("msg", "")


def field_errors(errors: list[dict]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != BODY_FIELD]
        name = BODY_FIELD if err.get("type") == "json_invalid" else (".".join(loc) or BODY_FIELD)
        grouped.setdefault(name, []).append(error_message(err))
    return grouped


def validate_payload(model: Type[ModelT], payload: Any) -> ValidationOutcome[ModelT]:
    """Check payload against model without raising for bad input."""
    if not isinstance(payload, dict):
        return ValidationOutcome(errors={BODY_FIELD: [BODY_MESSAGE]})
    try:
        value = model.model_validate(payload)
    except PydanticValidationError as exc:
        return ValidationOutcome(errors=field_errors(exc.errors()))
    return ValidationOutcome(value=value)
