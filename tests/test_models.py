from __future__ import annotations

import pytest
from pydantic import ValidationError

from retrocatalog.core.models import Playlist, Track, ViewState


def _payload() -> dict:
    return {
        "id": "t1",
        "name": "Megalovania",
        "artists": [{"name": "Toby Fox", "id": "a1"}, {"name": "Guest"}],
        "album": {"name": "Undertale", "images": [{"url": "https://i.scdn.co/image/a"}, {"url": "https://i.scdn.co/image/b"}]},
        "duration_ms": 156000,
        "preview_url": "https://p.scdn.co/mp3-preview/x",
        "explicit": False,
    }


def test_track_ignores_unknown_fields_and_keeps_order() -> None:
    track = Track.model_validate(_payload())
    assert track.artist_names == ["Toby Fox", "Guest"]
    assert track.album.image_urls == ["https://i.scdn.co/image/a", "https://i.scdn.co/image/b"]
    assert track.preview_url == "https://p.scdn.co/mp3-preview/x"


def test_track_preview_url_is_nullable() -> None:
    payload = _payload()
    payload["preview_url"] = None
    assert Track.model_validate(payload).preview_url is None


def test_track_is_immutable() -> None:
    track = Track.model_validate(_payload())
    with pytest.raises(ValidationError):
        track.name = "Other"  # type: ignore[misc]


def test_track_requires_album() -> None:
    payload = _payload()
    del payload["album"]
    with pytest.raises(ValidationError):
        Track.model_validate(payload)


def test_playlist_with_embedded_tracks() -> None:
    playlist = Playlist.model_validate(
        {
            "id": "p1",
            "name": "Boss Battles",
            "description": "Final bosses only",
            "images": None,
            "tracks": {"total": 1, "items": [{"track": _payload()}]},
        }
    )
    assert playlist.image_urls == []
    assert playlist.tracks.total == 1
    assert playlist.tracks.items[0].track is not None
    assert playlist.tracks.items[0].track.id == "t1"


def test_view_state_defaults() -> None:
    state = ViewState()
    assert state.is_loading is False
    assert state.error is None
    assert state.tracks == []
    assert state.playlists == []
