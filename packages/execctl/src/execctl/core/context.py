from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .clock import utc_stamp
from .env import getenv, getenv_flag
from .errors import InvalidCommandError

EnvPolicy = Literal["merge", "replace"]
ENV_POLICIES: tuple[str, ...] = ("merge", "replace")
DEFAULT_LINT_TOOL = "shellcheck"


def parse_env_policy(raw: str | None) -> EnvPolicy:
    value = (raw or "merge").strip().lower()
    if value not in ENV_POLICIES:
        raise InvalidCommandError(f"unknown env policy `{raw}`; expected one of: {', '.join(ENV_POLICIES)}")
    return value  # type: ignore[return-value]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    verbose: bool
    quiet: bool
    log_json: bool
    env_policy: EnvPolicy
    lint_tool: str
    os_name: str | None

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
        env_policy: str | None = None,
        lint_tool: str | None = None,
        os_name: str | None = None,
    ) -> "RunContext":
        resolved_run_id = run_id or getenv("EXECCTL_RUN_ID") or f"execctl-{utc_stamp()}"
        return cls(
            run_id=resolved_run_id,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json or getenv_flag("EXECCTL_LOG_JSON"),
            env_policy=parse_env_policy(env_policy or getenv("EXECCTL_ENV_POLICY")),
            lint_tool=lint_tool or getenv("EXECCTL_LINT_TOOL") or DEFAULT_LINT_TOOL,
            os_name=os_name or getenv("EXECCTL_OS_NAME") or None,
        )
