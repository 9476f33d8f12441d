from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path, monkeypatch):
    """Keep persisted settings out of the real home directory."""

    home = tmp_path / "mayacal-home"
    monkeypatch.setenv("MAYACAL_HOME", str(home))
    return home
