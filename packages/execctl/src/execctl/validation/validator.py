"""Script validation entry points.

The host OS family picks the strategy; only Unix-like hosts are supported.
Other families fail with `UnsupportedPlatformError` instead of degrading.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Union

from ..core.context import DEFAULT_LINT_TOOL
from ..core.errors import InvalidCommandError, UnsupportedPlatformError
from ..core.host import DISPLAY_NAMES, OsFamily, classify_os, host_os_name
from ..core.logging import log_event
from .result import ScriptValidationResult
from .shellcheck import Runner, ShellcheckStrategy

if TYPE_CHECKING:
    from ..core.context import RunContext

ScriptRef = Union[str, os.PathLike, IO[str], IO[bytes]]


def normalize_script(script: ScriptRef | None) -> str:
    if script is None:
        raise InvalidCommandError("script must not be None")
    if isinstance(script, (str, os.PathLike)):
        path = os.fspath(script)
    else:
        name = getattr(script, "name", None)
        if not isinstance(name, (str, os.PathLike)):
            raise InvalidCommandError(f"cannot resolve a script path from {type(script).__name__}")
        path = os.fspath(name)
    if isinstance(path, bytes):
        path = os.fsdecode(path)
    if not path:
        raise InvalidCommandError("script path must not be empty")
    return path


def strategy_for(
    os_name: str,
    runner: Runner | None = None,
    tool: str = DEFAULT_LINT_TOOL,
    ctx: RunContext | None = None,
) -> ShellcheckStrategy:
    family = classify_os(os_name)
    if family is OsFamily.UNIX_LIKE:
        return ShellcheckStrategy(runner=runner, tool=tool, ctx=ctx)
    if family is OsFamily.UNKNOWN:
        raise UnsupportedPlatformError(f"OS '{os_name}' not supported by this method", os_name=os_name)
    raise UnsupportedPlatformError(
        f"Script validation not supported on {DISPLAY_NAMES[family]}.",
        os_name=os_name,
    )


def validate_script_payload(
    script: ScriptRef | None,
    *,
    runner: Runner | None = None,
    os_name: str | None = None,
    ctx: RunContext | None = None,
) -> dict[str, object]:
    path = normalize_script(script)
    resolved_os = os_name or (ctx.os_name if ctx else None) or host_os_name()
    tool = ctx.lint_tool if ctx else DEFAULT_LINT_TOOL
    payload = strategy_for(resolved_os, runner=runner, tool=tool, ctx=ctx).validate(path)
    if ctx and not ctx.quiet:
        log_event(
            ctx,
            "info",
            "validation",
            "validate-script",
            script=path,
            os=resolved_os,
            valid=payload["isValid"],
            code=payload["exitValue"],
        )
    return payload


def validate_script(
    script: ScriptRef | None,
    *,
    runner: Runner | None = None,
    os_name: str | None = None,
    ctx: RunContext | None = None,
) -> ScriptValidationResult:
    return ScriptValidationResult.from_mapping(validate_script_payload(script, runner=runner, os_name=os_name, ctx=ctx))
