from __future__ import annotations

from dataclasses import dataclass, field

from .exit_codes import ERR_INTERNAL, ERR_PLATFORM, ERR_PREREQ, ERR_USAGE


@dataclass
class ScriptError(Exception):
    message: str
    code: int = ERR_INTERNAL
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


@dataclass
class InvalidCommandError(ScriptError):
    code: int = ERR_USAGE
    kind: str = "invalid_command"


@dataclass
class InvalidResultError(ScriptError):
    code: int = ERR_USAGE
    kind: str = "invalid_result"


@dataclass
class CommandFailedError(ScriptError):
    """Raised by the fail-fast form when the child exits non-zero.

    `code` mirrors `exit_code` so the CLI can exit with the child's status.
    """

    code: int = 1
    kind: str = "command_failed"
    command: tuple[str, ...] = field(default_factory=tuple)
    exit_code: int = 1
    stdout: str = ""
    stderr: str = ""


@dataclass
class ToolUnavailableError(ScriptError):
    code: int = ERR_PREREQ
    kind: str = "tool_unavailable"
    tool: str = ""


@dataclass
class UnsupportedPlatformError(ScriptError):
    code: int = ERR_PLATFORM
    kind: str = "unsupported_platform"
    os_name: str = ""
