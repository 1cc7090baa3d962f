from __future__ import annotations

import argparse
import platform
import shutil
import sys

from .. import __version__
from ..contracts import SCHEMA_DOCTOR, SCHEMA_RUN, SCHEMA_VALIDATE, validate_self
from ..core.context import RunContext
from ..core.errors import InvalidCommandError, ScriptError
from ..core.exit_codes import ERR_INTERNAL
from ..core.host import OsFamily, classify_os, host_os_name
from ..core.logging import log_event
from ..core.process import check_command, run_command
from ..validation import normalize_script, validate_script
from .output import build_base_payload, emit, render_error


def _add_exec_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--cwd", help="working directory for the child process")
    p.add_argument("--env", action="append", default=[], metavar="KEY=VALUE", help="environment overlay entry")
    p.add_argument("--replace-env", action="store_true", help="use only --env entries as the child environment")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("command", nargs=argparse.REMAINDER, help="command and arguments, after `--`")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="execctl")
    p.add_argument("--version", action="version", version=f"execctl {__version__}")
    p.add_argument("--run-id", help="run identifier for log events")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines")
    p.add_argument("--os-name", help="override the detected host OS name")
    p.add_argument("--lint-tool", help="script lint executable (default: shellcheck)")
    p.add_argument("--verbose", action="store_true", help="emit log events to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="run a command and report its outcome")
    _add_exec_args(run_p)
    check_p = sub.add_parser("check", help="run a command and fail on a non-zero exit")
    _add_exec_args(check_p)

    val_p = sub.add_parser("validate-script", help="lint a shell script with shellcheck")
    val_p.add_argument("script")
    val_p.add_argument("--json", action="store_true", help="emit JSON output")

    doctor_p = sub.add_parser("doctor", help="show host and lint tool diagnostics")
    doctor_p.add_argument("--json", action="store_true", help="emit JSON output")

    version_p = sub.add_parser("version", help="print version")
    version_p.add_argument("--json", action="store_true", help="emit JSON output")
    return p


def _parse_env(entries: list[str]) -> dict[str, str]:
    env: dict[str, str] = {}
    for entry in entries:
        key, sep, value = entry.partition("=")
        if not sep or not key:
            raise InvalidCommandError(f"invalid --env entry `{entry}`; expected KEY=VALUE")
        env[key] = value
    return env


def _command_args(ns: argparse.Namespace) -> list[str]:
    args = list(ns.command)
    if args and args[0] == "--":
        args = args[1:]
    return args


def _exit_status(code: int) -> int:
    # signal deaths come back negative from subprocess
    return 128 - code if code < 0 else code


def _run_exec(ctx: RunContext, ns: argparse.Namespace) -> int:
    args = _command_args(ns)
    env = _parse_env(ns.env)
    policy = "replace" if ns.replace_env else None
    if ns.cmd == "check":
        out = check_command(args, cwd=ns.cwd, env=env, env_policy=policy, ctx=ctx)
        if ns.json:
            payload = {
                **build_base_payload(ctx, SCHEMA_RUN),
                "command": args,
                "cwd": ns.cwd,
                "success": True,
                "exitValue": 0,
                "out": out,
                "err": "",
            }
            emit(validate_self(SCHEMA_RUN, payload), True)
        elif out:
            print(out)
        return 0
    result = run_command(args, cwd=ns.cwd, env=env, env_policy=policy, ctx=ctx)
    if ns.json:
        payload = {
            **build_base_payload(ctx, SCHEMA_RUN, "ok" if result.success else "fail"),
            "command": args,
            "cwd": ns.cwd,
            **result.to_payload(),
            "duration_ms": result.duration_ms,
        }
        emit(validate_self(SCHEMA_RUN, payload), True)
    else:
        if result.stdout:
            print(result.stdout)
        if result.stderr:
            print(result.stderr, file=sys.stderr)
    return _exit_status(result.code)


def _run_validate(ctx: RunContext, ns: argparse.Namespace) -> int:
    script = normalize_script(ns.script)
    result = validate_script(script, ctx=ctx)
    if ns.json:
        payload = {
            **build_base_payload(ctx, SCHEMA_VALIDATE, "ok" if result.valid else "fail"),
            "script": script,
            **result.to_mapping(),
        }
        emit(validate_self(SCHEMA_VALIDATE, payload), True)
    else:
        if result.validation_output:
            print(result.validation_output)
        if result.error_output:
            print(result.error_output, file=sys.stderr)
        print(f"{script}: {'valid' if result.valid else 'invalid'} (exit {result.exit_code})")
    return 0 if result.valid else 1


def _run_doctor(ctx: RunContext, ns: argparse.Namespace) -> int:
    os_name = ctx.os_name or host_os_name()
    family = classify_os(os_name)
    tool_path = shutil.which(ctx.lint_tool)
    supported = family is OsFamily.UNIX_LIKE
    payload = {
        **build_base_payload(ctx, SCHEMA_DOCTOR, "ok" if supported and tool_path else "fail"),
        "os_name": os_name,
        "os_family": family.value,
        "supported": supported,
        "lint_tool": ctx.lint_tool,
        "lint_tool_found": tool_path is not None,
        "lint_tool_path": tool_path,
        "python_version": platform.python_version(),
        "execctl_version": __version__,
    }
    if ns.json:
        emit(validate_self(SCHEMA_DOCTOR, payload), True)
    else:
        for key in ("os_name", "os_family", "supported", "lint_tool", "lint_tool_found", "lint_tool_path"):
            print(f"{key}: {payload[key]}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    as_json = bool(getattr(ns, "json", False))
    try:
        ctx = RunContext.from_args(
            run_id=ns.run_id,
            verbose=ns.verbose,
            quiet=not ns.verbose,
            log_json=ns.log_json,
            lint_tool=ns.lint_tool,
            os_name=ns.os_name,
        )
        if ctx.verbose:
            log_event(ctx, "info", "cli", "start", cmd=ns.cmd)
        if ns.cmd in {"run", "check"}:
            return _run_exec(ctx, ns)
        if ns.cmd == "validate-script":
            return _run_validate(ctx, ns)
        if ns.cmd == "doctor":
            return _run_doctor(ctx, ns)
        if ns.cmd == "version":
            if as_json:
                emit({"tool": "execctl", "version": __version__}, True)
            else:
                print(f"execctl {__version__}")
            return 0
        return 2
    except ScriptError as exc:
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return _exit_status(exc.code)
    except OSError as exc:
        print(render_error(as_json=as_json, message=f"os error: {exc}", code=ERR_INTERNAL, kind="os_error"), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
