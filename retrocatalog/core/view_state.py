from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from .models import Playlist, Track, ViewState
from .spotify_client import SpotifyCatalogClient, format_duration

logger = logging.getLogger(__name__)

Listener = Callable[[ViewState], None]


class CatalogViewState:
    """Loading/error/result state for the catalog actions a UI triggers.

    Every action marks the state as loading before touching the network and
    clears the flag on every exit path. A failure keeps the previous results
    and surfaces a fixed message; the underlying error only goes to the log.
    Overlapping actions are not serialized, so the last one to finish wins.
    """

    format_duration = staticmethod(format_duration)

    def __init__(self, client: SpotifyCatalogClient | None = None) -> None:
        self.client = client or SpotifyCatalogClient()
        self.state = ViewState()
        self._listeners: list[Listener] = []

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def error(self) -> str | None:
        return self.state.error

    @property
    def tracks(self) -> list[Track]:
        return self.state.tracks

    @property
    def playlists(self) -> list[Playlist]:
        return self.state.playlists

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes: Any) -> None:
        self.state = self.state.model_copy(update=changes)
        for listener in list(self._listeners):
            try:
                listener(self.state)
            except Exception:
                logger.exception("View state listener failed")

    async def _run(self, fetch: Callable[[], Awaitable[list[Any]]], field: str, error_message: str) -> None:
        self._set(is_loading=True, error=None)
        try:
            results = await fetch()
            self._set(**{field: list(results)})
        except Exception:
            logger.exception(error_message)
            self._set(error=error_message)
        finally:
            self._set(is_loading=False)

    async def search_tracks(self, query: str) -> None:
        await self._run(lambda: self.client.search_tracks(query), "tracks", "Error searching tracks")

    async def load_retro_gaming_tracks(self) -> None:
        await self._run(self.client.search_retro_gaming_tracks, "tracks", "Error loading retro gaming tracks")

    async def load_featured_playlists(self) -> None:
        await self._run(self.client.get_featured_playlists, "playlists", "Error loading featured playlists")

    async def load_playlist_tracks(self, playlist_id: str) -> None:
        await self._run(lambda: self.client.get_playlist_tracks(playlist_id), "tracks", "Error loading playlist tracks")
