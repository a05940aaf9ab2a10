"""Shared fixtures: every test runs against an isolated config directory."""

import pytest

from laborcalc.sdk.rules import reset_registry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the SDK at an empty config dir and the bundled rule files."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    monkeypatch.setenv("LABOR_CALC_CONFIG_PATH", str(config_dir))
    monkeypatch.delenv("LABOR_CALC_RULES_PATH", raising=False)

    reset_registry()
    yield config_dir
    reset_registry()
