from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from ..core.errors import ScriptError
from ..core.exit_codes import ERR_VALIDATION

SCHEMA_RUN = "execctl.run.v1"
SCHEMA_VALIDATE = "execctl.validate-script.v1"
SCHEMA_DOCTOR = "execctl.doctor.v1"
SCHEMA_ERROR = "execctl.error.v1"


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    version: int
    file: str


def schemas_root() -> Path:
    return Path(__file__).resolve().parent / "schemas"


def load_catalog() -> dict[str, CatalogEntry]:
    raw = json.loads((schemas_root() / "catalog.json").read_text(encoding="utf-8"))
    entries: dict[str, CatalogEntry] = {}
    for row in raw.get("schemas", []):
        entry = CatalogEntry(name=row["name"], version=int(row["version"]), file=row["file"])
        entries[entry.name] = entry
    return entries


@lru_cache(maxsize=None)
def _load_schema(schema_name: str) -> dict[str, Any]:
    entry = load_catalog().get(schema_name)
    if entry is None:
        raise ScriptError(f"unknown schema: {schema_name}", ERR_VALIDATION)
    return json.loads((schemas_root() / entry.file).read_text(encoding="utf-8"))


def validate(schema_name: str, payload: Any) -> None:
    import jsonschema

    try:
        jsonschema.validate(payload, _load_schema(schema_name))
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ScriptError(f"schema validation failed for {schema_name} at {loc}: {exc.message}", ERR_VALIDATION) from exc


def validate_self(schema_name: str, payload: dict[str, Any]) -> dict[str, Any]:
    validate(schema_name, payload)
    return payload
