"""Tests for loading user settings."""

import json
import logging

from modit.cursor import VerticalMotion
from modit.settings import EditorSettings, default_settings_path, load_settings, settings_from_dict


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "nope.json")
    assert settings == EditorSettings()
    assert settings.line_numbers is True
    assert settings.vertical_motion is VerticalMotion.PRESERVE
    assert settings.strip_placeholder_on_save is False


def test_values_are_read(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "line_numbers": False,
        "vertical_motion": "line_end",
        "strip_placeholder_on_save": True,
    }), encoding="utf-8")
    settings = load_settings(path)
    assert settings.line_numbers is False
    assert settings.vertical_motion is VerticalMotion.LINE_END
    assert settings.strip_placeholder_on_save is True


def test_corrupt_file_logs_and_uses_defaults(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="modit.settings"):
        settings = load_settings(path)
    assert settings == EditorSettings()
    assert "Could not load settings" in caplog.text


def test_non_dict_file_is_ignored(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="modit.settings"):
        assert load_settings(path) == EditorSettings()
    assert "not a dict" in caplog.text


def test_bad_values_keep_defaults(caplog):
    with caplog.at_level(logging.WARNING, logger="modit.settings"):
        settings = settings_from_dict({
            "vertical_motion": "diagonal",
            "line_numbers": "yes",
            "colour": "green",
        })
    assert settings == EditorSettings()
    assert "Invalid vertical_motion" in caplog.text
    assert "must be true or false" in caplog.text
    assert "Unknown setting 'colour'" in caplog.text


def test_env_var_overrides_location(tmp_path, monkeypatch):
    target = tmp_path / "custom.json"
    monkeypatch.setenv("MODIT_CONFIG", str(target))
    assert default_settings_path() == target


def test_default_location_is_in_config_dir(monkeypatch):
    monkeypatch.delenv("MODIT_CONFIG", raising=False)
    path = default_settings_path()
    assert path.name == "settings.json"
    assert "modit" in str(path)
