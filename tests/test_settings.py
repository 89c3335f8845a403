from __future__ import annotations

from pathlib import Path

import pytest

from retrocatalog.core.settings import SPOTIFY_DEFAULTS, load_settings, log_level, spotify_config


def test_load_settings_missing_file(tmp_path: Path) -> None:
    assert load_settings(str(tmp_path / "missing.yaml")) == {}


def test_load_settings_from_env_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("spotify:\n  token_expiry_margin_sec: 30\nlogging:\n  level: debug\n")
    monkeypatch.setenv("CATALOG_SETTINGS_PATH", str(path))

    settings = load_settings()
    assert spotify_config(settings)["token_expiry_margin_sec"] == 30
    assert log_level(settings) == "DEBUG"


def test_load_settings_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("")
    assert load_settings(str(path)) == {}


def test_spotify_config_defaults() -> None:
    cfg = spotify_config({"spotify": {"api_base": None, "client_id_env": "MY_ID"}})
    assert cfg["api_base"] == SPOTIFY_DEFAULTS["api_base"]
    assert cfg["auth_base"] == "https://accounts.spotify.com"
    assert cfg["client_id_env"] == "MY_ID"
    assert cfg["request_timeout_sec"] is None
    assert log_level({}) == "WARNING"
