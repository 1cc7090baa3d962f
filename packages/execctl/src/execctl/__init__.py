__version__ = "0.1.0"

from .core.errors import (
    CommandFailedError,
    InvalidCommandError,
    InvalidResultError,
    ScriptError,
    ToolUnavailableError,
    UnsupportedPlatformError,
)
from .core.process import CommandResult, ExecutionContext, check_command, run_command
from .validation import ScriptValidationResult, ShellcheckExit, validate_script, validate_script_payload

__all__ = [
    "__version__",
    "CommandFailedError",
    "CommandResult",
    "ExecutionContext",
    "InvalidCommandError",
    "InvalidResultError",
    "ScriptError",
    "ScriptValidationResult",
    "ShellcheckExit",
    "ToolUnavailableError",
    "UnsupportedPlatformError",
    "check_command",
    "run_command",
    "validate_script",
    "validate_script_payload",
]
