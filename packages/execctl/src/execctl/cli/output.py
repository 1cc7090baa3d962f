"""CLI payload output helpers."""

from __future__ import annotations

from ..contracts import SCHEMA_ERROR, validate_self
from ..core.context import RunContext
from ..core.serialize import dumps_json


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def build_base_payload(ctx: RunContext, schema_name: str, status: str = "ok") -> dict[str, object]:
    return {
        "schema_name": schema_name,
        "schema_version": 1,
        "tool": "execctl",
        "status": status,
        "run_id": ctx.run_id,
    }


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        payload = validate_self(
            SCHEMA_ERROR,
            {
                "schema_name": SCHEMA_ERROR,
                "schema_version": 1,
                "tool": "execctl",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
        )
        return dumps_json(payload, pretty=False)
    return message
