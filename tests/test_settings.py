"""
Tests for settings loading.
"""

import json

import pytest
from gs1_scan import DEFAULT_SETTINGS, load_settings
from gs1_scan.settings import SETTINGS_ENV_VAR


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)

        settings = load_settings()

        assert settings == DEFAULT_SETTINGS
        assert settings is not DEFAULT_SETTINGS

    def test_file_overrides(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "near_expiry_months": 3,
            "display_labels": {"expiry_date": "Utløper"},
            "unknown_key": True,
        }), encoding="utf-8")

        settings = load_settings(path)

        assert settings["near_expiry_months"] == 3
        assert settings["display_labels"]["expiry_date"] == "Utløper"
        assert settings["display_labels"]["product_code"] == "GTIN"
        assert "unknown_key" not in settings
        assert DEFAULT_SETTINGS["display_labels"]["expiry_date"] == "Expires"

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"display_date_format": "%Y-%m-%d"}), encoding="utf-8")
        monkeypatch.setenv(SETTINGS_ENV_VAR, str(path))

        assert load_settings()["display_date_format"] == "%Y-%m-%d"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{broken", encoding="utf-8")

        with pytest.raises(ValueError):
            load_settings(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError):
            load_settings(path)

    def test_labels_must_be_object(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"display_labels": "GTIN"}), encoding="utf-8")

        with pytest.raises(ValueError):
            load_settings(path)

    @pytest.mark.parametrize("overrides", [
        {"near_expiry_months": "6"},
        {"near_expiry_months": True},
        {"display_date_format": 12},
        {"display_labels": {"lot_number": 10}},
    ])
    def test_wrong_value_type(self, tmp_path, overrides):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(overrides), encoding="utf-8")

        with pytest.raises(ValueError):
            load_settings(path)
