from __future__ import annotations

import os

import pytest
from hypothesis import settings

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

settings.register_profile("execctl", deadline=None, max_examples=25)
settings.load_profile("execctl")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def clean_execctl_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("EXECCTL_"):
            monkeypatch.delenv(name, raising=False)
