from __future__ import annotations

import pytest

from semver_ranges.settings import CONFIG_PATH_ENV_VAR, STRICT_ENV_VAR, Settings, set_settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
    monkeypatch.delenv(STRICT_ENV_VAR, raising=False)
    set_settings(Settings())
    yield
    set_settings(None)
