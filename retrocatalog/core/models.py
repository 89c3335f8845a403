from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Artist(_Snapshot):
    name: str


class Image(_Snapshot):
    url: str


class Album(_Snapshot):
    name: str
    images: list[Image] = Field(default_factory=list)

    @property
    def image_urls(self) -> list[str]:
        return [image.url for image in self.images]


class Track(_Snapshot):
    id: str
    name: str
    artists: list[Artist] = Field(default_factory=list)
    album: Album
    duration_ms: int
    preview_url: str | None = None

    @property
    def artist_names(self) -> list[str]:
        return [artist.name for artist in self.artists]


class PlaylistTrackItem(_Snapshot):
    track: Track | None = None


class PlaylistTracks(_Snapshot):
    total: int = 0
    items: list[PlaylistTrackItem] = Field(default_factory=list)


class Playlist(_Snapshot):
    id: str
    name: str
    description: str = ""
    images: list[Image] = Field(default_factory=list)
    tracks: PlaylistTracks = Field(default_factory=PlaylistTracks)

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value: str | None) -> str:
        return value or ""

    @field_validator("images", mode="before")
    @classmethod
    def _null_images(cls, value: list | None) -> list:
        return value or []

    @property
    def image_urls(self) -> list[str]:
        return [image.url for image in self.images]


class ViewState(_Snapshot):
    is_loading: bool = False
    error: str | None = None
    tracks: list[Track] = Field(default_factory=list)
    playlists: list[Playlist] = Field(default_factory=list)
