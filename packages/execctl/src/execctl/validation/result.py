"""Typed view over a script validation outcome."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from ..core.errors import InvalidResultError


_INTEGER = re.compile(r"[+-]?[0-9]+")


class ShellcheckExit(IntEnum):
    NO_ISSUES = 0
    ISSUES_FOUND = 1
    FILE_ACCESS = 2
    NO_INPUT = 3
    INTERRUPTED = 4


def _parse_valid(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in {"true", "false"}:
        return raw.strip().lower() == "true"
    raise InvalidResultError(f"Invalid isValid value: {raw!r}")


def _parse_exit_code(raw: Any) -> int:
    if isinstance(raw, bool):
        raise InvalidResultError(f"Invalid exit value: {raw!r}")
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidResultError(f"Invalid exit value: {raw}")
    return int(text)


@dataclass(frozen=True)
class ScriptValidationResult:
    """Result of validating one script.

    `valid` is true only when the lint tool exited 0. `exit_code` is passed
    through from the tool unchanged; for shellcheck see `ShellcheckExit`.
    """

    valid: bool
    exit_code: int
    validation_output: str = ""
    error_output: str = ""

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "ScriptValidationResult":
        if mapping is None:
            raise InvalidResultError("Result map cannot be None")
        if mapping.get("isValid") is None:
            raise InvalidResultError("Result map must contain 'isValid' key")
        if mapping.get("exitValue") is None:
            raise InvalidResultError("Result map must contain 'exitValue' key")
        return cls(
            valid=_parse_valid(mapping["isValid"]),
            exit_code=_parse_exit_code(mapping["exitValue"]),
            validation_output=str(mapping.get("out") or ""),
            error_output=str(mapping.get("err") or ""),
        )

    @property
    def exit_reason(self) -> ShellcheckExit | None:
        try:
            return ShellcheckExit(self.exit_code)
        except ValueError:
            return None

    def to_mapping(self) -> dict[str, object]:
        return {
            "isValid": self.valid,
            "exitValue": self.exit_code,
            "out": self.validation_output,
            "err": self.error_output,
        }

    def __str__(self) -> str:
        parts = [f"valid={str(self.valid).lower()}", f"exitCode={self.exit_code}"]
        if self.validation_output:
            parts.append(f"validationOutput='{self.validation_output}'")
        if self.error_output:
            parts.append(f"errorOutput='{self.error_output}'")
        return "ScriptValidationResult{" + ", ".join(parts) + "}"
