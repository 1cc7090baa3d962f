"""Command and execution-context preconditions.

Everything here runs before a child process is spawned, so a malformed
invocation never reaches `subprocess`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .context import EnvPolicy, parse_env_policy
from .errors import InvalidCommandError


def normalize_command(cmd: Sequence[str | os.PathLike[str]]) -> list[str]:
    if cmd is None:
        raise InvalidCommandError("command must not be None")
    if isinstance(cmd, (str, bytes)):
        raise InvalidCommandError("command must be a sequence of arguments, not a single string")
    args = list(cmd)
    if not args:
        raise InvalidCommandError("command must not be empty")
    out: list[str] = []
    for index, arg in enumerate(args):
        if arg is None:
            raise InvalidCommandError(f"command element {index} is None")
        if isinstance(arg, os.PathLike):
            arg = os.fspath(arg)
        if not isinstance(arg, str):
            raise InvalidCommandError(f"command element {index} must be a string, got {type(arg).__name__}")
        out.append(arg)
    if not out[0]:
        raise InvalidCommandError("command executable must not be an empty string")
    return out


@dataclass(frozen=True)
class ExecutionContext:
    cwd: Path | None = None
    env: Mapping[str, str] = field(default_factory=dict)
    env_policy: EnvPolicy = "merge"

    @classmethod
    def build(
        cls,
        cwd: str | os.PathLike[str] | None = None,
        env: Mapping[str, str] | None = None,
        env_policy: str | None = "merge",
    ) -> "ExecutionContext":
        return cls(
            cwd=Path(cwd) if cwd is not None else None,
            env=dict(env or {}),
            env_policy=parse_env_policy(env_policy),
        )

    def resolve_cwd(self) -> Path | None:
        if self.cwd is None:
            return None
        if not self.cwd.exists():
            raise InvalidCommandError(f"working directory does not exist: {self.cwd}")
        if not self.cwd.is_dir():
            raise InvalidCommandError(f"working directory is not a directory: {self.cwd}")
        return self.cwd

    def resolve_env(self) -> dict[str, str] | None:
        """Return the child environment, or None to inherit ours unchanged."""
        for key, value in self.env.items():
            if not isinstance(key, str) or not key:
                raise InvalidCommandError(f"environment variable names must be non-empty strings, got {key!r}")
            if "=" in key:
                raise InvalidCommandError(f"environment variable name must not contain '=': {key}")
            if not isinstance(value, str):
                raise InvalidCommandError(f"environment variable `{key}` must map to a string, got {type(value).__name__}")
        if self.env_policy == "replace":
            return dict(self.env)
        if not self.env:
            return None
        return {**os.environ, **self.env}
