from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from execctl.core.process import CommandResult


class FakeRunner:
    """Stands in for `run_command`; answers by executable name."""

    def __init__(self, results: dict[str, CommandResult | BaseException]) -> None:
        self.results = dict(results)
        self.calls: list[list[str]] = []

    def __call__(self, cmd: Sequence[str]) -> CommandResult:
        self.calls.append(list(cmd))
        outcome = self.results[cmd[0]]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def ok(stdout: str = "", stderr: str = "") -> CommandResult:
    return CommandResult(code=0, stdout=stdout, stderr=stderr)


def failed(code: int, stdout: str = "", stderr: str = "") -> CommandResult:
    return CommandResult(code=code, stdout=stdout, stderr=stderr)


def write_stub_tool(directory: Path, name: str, stdout: str, code: int) -> Path:
    """Write an executable shell stub that echoes its arguments and exits with `code`."""
    directory.mkdir(parents=True, exist_ok=True)
    tool = directory / name
    tool.write_text(f'#!/bin/sh\necho "{stdout}"\necho "args: $*"\nexit {code}\n', encoding="utf-8")
    tool.chmod(0o755)
    return tool
