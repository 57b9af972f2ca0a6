"""
Configuration helpers for the Clients API.

Settings are read once from environment variables so that routers/services do
not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_CEP_PROVIDERS = ("brasilapi", "viacep")
KNOWN_CEP_PROVIDERS = {"brasilapi", "viacep"}


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: Path
    cep_providers: tuple[str, ...]
    cep_timeout_seconds: float
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _float(value: str | None, default: float = 0.0) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    def _providers(value: str | None) -> tuple[str, ...]:
        names = [p.strip().lower() for p in (value or "").split(",")]
        names = [p for p in names if p in KNOWN_CEP_PROVIDERS]
        return tuple(dict.fromkeys(names)) or DEFAULT_CEP_PROVIDERS

    data_file = Path(os.getenv("CLIENTS_DATA_FILE") or "users.json")
    if not data_file.is_absolute():
        data_file = Path.cwd() / data_file

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        data_file=data_file,
        cep_providers=_providers(os.getenv("CEP_PROVIDERS")),
        cep_timeout_seconds=_float(os.getenv("CEP_TIMEOUT_SECONDS", "10"), 10.0),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
