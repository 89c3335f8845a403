from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Iterable
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from .errors import AuthError, CatalogError, CatalogRequestError
from .models import Playlist, Track
from .settings import load_settings, spotify_config

logger = logging.getLogger(__name__)

RETRO_GAMING_QUERIES: tuple[str, ...] = (
    "chiptune 8bit",
    "video game music",
    "retro gaming soundtrack",
    "synthwave gaming",
    "pixel music",
    "arcade music",
)
RETRO_GAMING_PER_QUERY_LIMIT = 10
RETRO_GAMING_MAX_RESULTS = 20

_DEGRADABLE = (CatalogError, httpx.HTTPError, AttributeError, KeyError, TypeError, ValueError)

_tracks = TypeAdapter(list[Track])
_playlists = TypeAdapter(list[Playlist])


def format_duration(duration_ms: int) -> str:
    minutes = duration_ms // 60000
    seconds = (duration_ms % 60000) // 1000
    return f"{minutes}:{seconds:02d}"


def dedupe_tracks(tracks: Iterable[Track]) -> list[Track]:
    seen: set[str] = set()
    unique: list[Track] = []
    for track in tracks:
        if track.id in seen:
            continue
        seen.add(track.id)
        unique.append(track)
    return unique


def _credentials_from_config(cfg: dict[str, Any]) -> tuple[str, str]:
    client_id = os.getenv(str(cfg["client_id_env"])) or ""
    if not client_id:
        logger.warning("Spotify Client ID not found in environment variables")
    client_secret = os.getenv(str(cfg["client_secret_env"])) or "dummy_secret"
    return client_id, client_secret


class SpotifyCatalogClient:
    """Client-credentials access to the Spotify catalog.

    The bearer token is cached on the instance and dropped by a timer on the
    running event loop shortly before Spotify would expire it. Data operations
    never raise: failures are logged and an empty list is returned. Only
    ``get_access_token`` propagates errors.

    The expiry timer lives on the loop that fetched the token, so one
    instance should be used from a single event loop.
    """

    def __init__(
        self,
        settings: dict[str, Any] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        cfg = spotify_config(load_settings() if settings is None else settings)
        self.client_id, self.client_secret = _credentials_from_config(cfg)
        self.api_base = str(cfg["api_base"]).rstrip("/")
        self.auth_base = str(cfg["auth_base"]).rstrip("/")
        self.expiry_margin_sec = float(cfg["token_expiry_margin_sec"])
        self.timeout_sec = cfg["request_timeout_sec"]

        self._http = http_client
        self._owns_http = http_client is None
        self._access_token: str | None = None
        self._expiry_handle: asyncio.TimerHandle | None = None

    async def __aenter__(self) -> "SpotifyCatalogClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        self._cancel_expiry()
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            if self.timeout_sec is None:
                self._http = httpx.AsyncClient()
            else:
                self._http = httpx.AsyncClient(timeout=float(self.timeout_sec))
        return self._http

    def _cancel_expiry(self) -> None:
        if self._expiry_handle is not None:
            self._expiry_handle.cancel()
            self._expiry_handle = None

    def _invalidate_token(self) -> None:
        self._access_token = None
        self._expiry_handle = None

    def _schedule_expiry(self, expires_in: float) -> None:
        self._cancel_expiry()
        delay = max(expires_in - self.expiry_margin_sec, 0.0)
        self._expiry_handle = asyncio.get_running_loop().call_later(delay, self._invalidate_token)

    async def get_access_token(self) -> str:
        if self._access_token:
            return self._access_token

        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        try:
            resp = await self._client().post(
                f"{self.auth_base}/api/token",
                headers=headers,
                content="grant_type=client_credentials",
                auth=(self.client_id, self.client_secret),
            )
        except httpx.HTTPError as exc:
            logger.error("Error getting Spotify access token: %s", exc)
            raise AuthError() from exc

        if not resp.is_success:
            logger.error("Error getting Spotify access token: HTTP %s", resp.status_code)
            raise AuthError()

        try:
            payload = resp.json()
            token = str(payload["access_token"])
            expires_in = float(payload["expires_in"])
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Error getting Spotify access token: malformed response (%s)", exc)
            raise AuthError() from exc

        self._access_token = token
        self._schedule_expiry(expires_in)
        return token

    async def _get_json(self, path: str, code: str, message: str, params: dict[str, Any] | None = None) -> Any:
        token = await self.get_access_token()
        resp = await self._client().get(
            f"{self.api_base}{path}",
            headers={"Authorization": f"Bearer {token}"},
            params=params,
        )
        if not resp.is_success:
            raise CatalogRequestError(code, f"{message}: {resp.status_code}")
        return resp.json()

    async def search_tracks(self, query: str, limit: int = 20) -> list[Track]:
        try:
            payload = await self._get_json(
                "/search",
                "SPOTIFY_SEARCH_FAILED",
                "Failed to search tracks",
                params={"q": query, "type": "track", "limit": limit},
            )
            return _tracks.validate_python(payload["tracks"]["items"])
        except _DEGRADABLE as exc:
            logger.error("Error searching tracks: %s", exc)
            return []

    async def get_featured_playlists(self, limit: int = 20) -> list[Playlist]:
        try:
            payload = await self._get_json(
                "/browse/featured-playlists",
                "SPOTIFY_FEATURED_FAILED",
                "Failed to get featured playlists",
                params={"limit": limit},
            )
            return _playlists.validate_python(payload["playlists"]["items"])
        except _DEGRADABLE as exc:
            logger.error("Error getting featured playlists: %s", exc)
            return []

    async def get_playlist_tracks(self, playlist_id: str) -> list[Track]:
        try:
            payload = await self._get_json(
                f"/playlists/{quote(playlist_id, safe='')}/tracks",
                "SPOTIFY_PLAYLIST_TRACKS_FAILED",
                "Failed to get playlist tracks",
            )
            # Deleted and local tracks come back as null entries.
            items = [item["track"] for item in payload["items"] if item and item.get("track") is not None]
            return _tracks.validate_python(items)
        except _DEGRADABLE as exc:
            logger.error("Error getting playlist tracks: %s", exc)
            return []

    async def search_retro_gaming_tracks(self) -> list[Track]:
        all_tracks: list[Track] = []
        for query in RETRO_GAMING_QUERIES:
            all_tracks.extend(await self.search_tracks(query, RETRO_GAMING_PER_QUERY_LIMIT))
        return dedupe_tracks(all_tracks)[:RETRO_GAMING_MAX_RESULTS]

    format_duration = staticmethod(format_duration)
