from __future__ import annotations

import os
from pathlib import Path

import pytest

from topoid import config


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    for name in list(os.environ):
        if name.upper().startswith("TOPOID_"):
            monkeypatch.delenv(name)
    # Keep a developer's .env out of the settings under test.
    monkeypatch.chdir(tmp_path)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()
