from __future__ import annotations

import platform

import pytest
from execctl.core.host import OsFamily, classify_os, host_os_name


@pytest.mark.parametrize(
    ("name", "family"),
    [
        ("Linux", OsFamily.UNIX_LIKE),
        ("LINUX", OsFamily.UNIX_LIKE),
        ("GNU/Linux", OsFamily.UNIX_LIKE),
        ("Unix", OsFamily.UNIX_LIKE),
        ("Darwin", OsFamily.MAC),
        ("Mac OS X", OsFamily.MAC),
        ("Windows", OsFamily.WINDOWS),
        ("Windows 10", OsFamily.WINDOWS),
        ("SunOS", OsFamily.SUNOS),
        ("FreeBSD", OsFamily.UNKNOWN),
        ("", OsFamily.UNKNOWN),
        (None, OsFamily.UNKNOWN),
    ],
)
def test_classify_os(name: str | None, family: OsFamily) -> None:
    assert classify_os(name) is family


def test_host_os_name_reads_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(platform, "system", lambda: "Plan9")
    assert host_os_name() == "Plan9"
