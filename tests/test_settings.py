"""
Tests for persistent settings
"""

import sys
import json
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from katas import settings as settings_module
from katas.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file_returns_defaults(tmp_path):
    result = load_settings(tmp_path / "config.json")
    assert result == DEFAULT_SETTINGS
    assert result is not DEFAULT_SETTINGS


def test_save_and_load(tmp_path):
    path = tmp_path / "config.json"
    save_settings({"strategy_name": "recursive", "timeout_sec": 2.5}, path)

    result = load_settings(path)
    assert result["strategy_name"] == "recursive"
    assert result["timeout_sec"] == 2.5
    # Missing keys come from defaults
    assert result["debug_enabled"] is False


def test_invalid_json_returns_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_non_object_json_returns_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(["stack"]), encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_default_location(tmp_path, monkeypatch):
    monkeypatch.setattr(settings_module, "SETTINGS_FILE", tmp_path / "config.json")
    save_settings({"debug_enabled": True})
    assert load_settings()["debug_enabled"] is True


def test_save_failure_is_logged(tmp_path, caplog):
    save_settings({"debug_enabled": True}, tmp_path / "missing" / "config.json")
    assert "Failed to save settings" in caplog.text
