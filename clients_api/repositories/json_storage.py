"""
JSON file persistence adapter.

The file holds the whole collection as a pretty-printed array; every save
overwrites it completely.
"""

from __future__ import annotations

from pathlib import Path
import json


def load(path: Path) -> list[dict]:
    """Read the stored array. Raises when the file is missing, corrupt or not a list."""
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} nao contem uma lista de clientes")
    return data


def save(path: Path, rows: list[dict]) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(rows, ensure_ascii=False, indent=2), encoding="utf-8")
