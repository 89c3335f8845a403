from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

SPOTIFY_DEFAULTS: dict[str, Any] = {
    "client_id_env": "SPOTIFY_CLIENT_ID",
    "client_secret_env": "SPOTIFY_CLIENT_SECRET",
    "api_base": "https://api.spotify.com/v1",
    "auth_base": "https://accounts.spotify.com",
    "token_expiry_margin_sec": 60,
    "request_timeout_sec": None,
}


def load_settings(path: str | None = None) -> dict[str, Any]:
    config_path = Path(path or os.getenv("CATALOG_SETTINGS_PATH", "config/settings.example.yaml"))
    if not config_path.exists():
        return {}
    return yaml.safe_load(config_path.read_text()) or {}


def spotify_config(settings: dict[str, Any]) -> dict[str, Any]:
    cfg = dict(SPOTIFY_DEFAULTS)
    cfg.update({k: v for k, v in (settings.get("spotify") or {}).items() if v is not None})
    return cfg


def log_level(settings: dict[str, Any]) -> str:
    return str((settings.get("logging") or {}).get("level", "WARNING")).upper()
