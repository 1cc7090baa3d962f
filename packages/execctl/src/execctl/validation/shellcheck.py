"""Unix-like validation strategy backed by the `shellcheck` linter."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from ..core.context import DEFAULT_LINT_TOOL
from ..core.errors import ToolUnavailableError
from ..core.logging import log_event
from ..core.process import CommandResult, run_command

if TYPE_CHECKING:
    from ..core.context import RunContext

Runner = Callable[[Sequence[str]], CommandResult]

INSTALL_HINTS: tuple[str, ...] = (
    "Ubuntu/Debian: apt install shellcheck",
    "CentOS/RHEL/Fedora: yum install ShellCheck (or dnf install ShellCheck)",
    "macOS: brew install shellcheck",
    "From source: https://github.com/koalaman/shellcheck#installing",
)


def unavailable_message(tool: str = DEFAULT_LINT_TOOL) -> str:
    hints = "\n".join(f"  - {hint}" for hint in INSTALL_HINTS)
    return (
        f"The '{tool}' utility is required for script validation but is not available on this system. "
        "Please install shellcheck using one of the following methods:\n"
        f"{hints}\n"
        f"After installation, ensure '{tool}' is available in your system PATH."
    )


def ensure_tool_available(tool: str, runner: Runner, ctx: RunContext | None = None) -> None:
    try:
        lookup = runner(["which", tool])
    except OSError as exc:
        raise ToolUnavailableError(unavailable_message(tool), tool=tool) from exc
    if ctx and not ctx.quiet:
        log_event(ctx, "info", "validation", "preflight", tool=tool, found=lookup.success)
    if not lookup.success:
        raise ToolUnavailableError(unavailable_message(tool), tool=tool)


def script_argument(script: str) -> str:
    # a leading dash would be parsed as an option by the lint tool
    return f"./{script}" if script.startswith("-") else script


class ShellcheckStrategy:
    def __init__(self, runner: Runner | None = None, tool: str = DEFAULT_LINT_TOOL, ctx: RunContext | None = None) -> None:
        self.tool = tool
        self.ctx = ctx
        # the tool is looked up on the inherited PATH whatever env policy the caller configured
        self.runner: Runner = runner or (lambda cmd: run_command(cmd, env_policy="merge", ctx=ctx))

    def validate(self, script: str) -> dict[str, object]:
        ensure_tool_available(self.tool, self.runner, self.ctx)
        result = self.runner([self.tool, script_argument(script)])
        payload = result.to_payload()
        del payload["success"]
        return {"isValid": result.success, **payload}
