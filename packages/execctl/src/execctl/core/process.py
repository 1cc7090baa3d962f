"""Centralized subprocess execution helpers.

`run_command` is the primary entry point and always reports the outcome.
`check_command` is the fail-fast variant: it returns stdout and raises
`CommandFailedError` when the child exits non-zero.
"""

from __future__ import annotations

import os
import subprocess
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .command import ExecutionContext, normalize_command
from .errors import CommandFailedError
from .logging import log_event

if TYPE_CHECKING:
    from .context import RunContext

__all__ = ["CommandResult", "ExecutionContext", "check_command", "run_command"]


@dataclass(frozen=True)
class CommandResult:
    code: int
    stdout: str
    stderr: str
    duration_ms: int = 0

    @property
    def success(self) -> bool:
        return self.code == 0

    @property
    def combined_output(self) -> str:
        return "\n".join(part for part in (self.stdout, self.stderr) if part)

    def to_payload(self) -> dict[str, object]:
        return {
            "success": self.success,
            "exitValue": self.code,
            "out": self.stdout,
            "err": self.stderr,
        }


def run_command(
    cmd: Sequence[str | os.PathLike[str]],
    cwd: str | os.PathLike[str] | None = None,
    env: Mapping[str, str] | None = None,
    env_policy: str | None = None,
    ctx: RunContext | None = None,
) -> CommandResult:
    args = normalize_command(cmd)
    policy = env_policy or (ctx.env_policy if ctx else "merge")
    exec_ctx = ExecutionContext.build(cwd=cwd, env=env, env_policy=policy)
    resolved_cwd = exec_ctx.resolve_cwd()
    resolved_env = exec_ctx.resolve_env()
    started = time.monotonic()
    proc = subprocess.run(
        args,
        cwd=resolved_cwd,
        env=resolved_env,
        text=True,
        capture_output=True,
        errors="replace",
        check=False,
    )
    result = CommandResult(
        code=proc.returncode,
        stdout=(proc.stdout or "").strip(),
        stderr=(proc.stderr or "").strip(),
        duration_ms=int((time.monotonic() - started) * 1000),
    )
    if ctx and not ctx.quiet:
        log_event(
            ctx,
            "info",
            "process",
            "run-command",
            command=" ".join(args),
            cwd=str(resolved_cwd) if resolved_cwd else "",
            env_policy=exec_ctx.env_policy,
            code=result.code,
            duration_ms=result.duration_ms,
        )
    return result


def check_command(
    cmd: Sequence[str | os.PathLike[str]],
    cwd: str | os.PathLike[str] | None = None,
    env: Mapping[str, str] | None = None,
    env_policy: str | None = None,
    ctx: RunContext | None = None,
) -> str:
    args = normalize_command(cmd)
    result = run_command(args, cwd=cwd, env=env, env_policy=env_policy, ctx=ctx)
    if result.success:
        return result.stdout
    detail = result.stderr or result.stdout
    message = f"command `{' '.join(args)}` exited with code {result.code}"
    raise CommandFailedError(
        message if not detail else f"{message}: {detail}",
        code=result.code,
        command=tuple(args),
        exit_code=result.code,
        stdout=result.stdout,
        stderr=result.stderr,
    )
