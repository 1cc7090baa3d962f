"""Host operating-system classification."""

from __future__ import annotations

import platform
from enum import Enum


class OsFamily(str, Enum):
    UNIX_LIKE = "unix_like"
    WINDOWS = "windows"
    MAC = "mac"
    SUNOS = "sunos"
    UNKNOWN = "unknown"


DISPLAY_NAMES = {
    OsFamily.UNIX_LIKE: "Unix-like",
    OsFamily.WINDOWS: "Windows",
    OsFamily.MAC: "Mac",
    OsFamily.SUNOS: "SunOS",
}


def host_os_name() -> str:
    return platform.system()


def classify_os(os_name: str | None) -> OsFamily:
    # str.lower() is locale independent; "darwin" has to be matched before "win".
    name = (os_name or "").strip().lower()
    if not name:
        return OsFamily.UNKNOWN
    if "darwin" in name or "mac" in name:
        return OsFamily.MAC
    if "win" in name:
        return OsFamily.WINDOWS
    if "nux" in name or "nix" in name:
        return OsFamily.UNIX_LIKE
    if "sunos" in name:
        return OsFamily.SUNOS
    return OsFamily.UNKNOWN
