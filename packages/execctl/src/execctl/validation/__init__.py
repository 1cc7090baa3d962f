"""Shell script validation through an external linter."""

from .result import ScriptValidationResult, ShellcheckExit
from .shellcheck import INSTALL_HINTS, ShellcheckStrategy, ensure_tool_available, script_argument
from .validator import normalize_script, strategy_for, validate_script, validate_script_payload

__all__ = [
    "INSTALL_HINTS",
    "ScriptValidationResult",
    "ShellcheckExit",
    "ShellcheckStrategy",
    "ensure_tool_available",
    "normalize_script",
    "script_argument",
    "strategy_for",
    "validate_script",
    "validate_script_payload",
]
