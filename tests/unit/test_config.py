"""Tests for settings and rules directory resolution."""

from pathlib import Path

from laborcalc.sdk.config import (
    BUNDLED_RULES_DIR,
    clear_setting,
    get_config_dir,
    get_rules_dir,
    get_setting,
    load_settings,
    set_setting,
)


class TestConfigDir:

    def test_env_var_wins(self, isolated_config):
        assert get_config_dir() == isolated_config

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LABOR_CALC_CONFIG_PATH")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / "labor-calc"


class TestSettings:

    def test_empty_when_missing(self):
        assert load_settings() == {}
        assert get_setting("default_jurisdiction") is None

    def test_set_and_clear(self, isolated_config):
        set_setting("default_jurisdiction", "uae")
        assert (isolated_config / "settings.json").exists()
        assert get_setting("default_jurisdiction") == "uae"

        assert clear_setting("default_jurisdiction") is True
        assert get_setting("default_jurisdiction") is None
        assert clear_setting("default_jurisdiction") is False


class TestRulesDir:

    def test_bundled_by_default(self):
        assert get_rules_dir() == BUNDLED_RULES_DIR
        assert (BUNDLED_RULES_DIR / "uae.yaml").exists()

    def test_setting_overrides_bundled(self, tmp_path):
        set_setting("rules_dir", str(tmp_path))
        assert get_rules_dir() == Path(tmp_path)

    def test_env_var_overrides_setting(self, tmp_path, monkeypatch):
        set_setting("rules_dir", str(tmp_path / "from-settings"))
        monkeypatch.setenv("LABOR_CALC_RULES_PATH", str(tmp_path / "from-env"))
        assert get_rules_dir() == tmp_path / "from-env"
