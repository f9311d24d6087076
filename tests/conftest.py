"""Test fixtures and configuration."""

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest
from songlist.exceptions import APIError
from songlist.models.song import PlaylistEntry
from songlist.models.spotify import AlbumRef, Artist, Track


class FakeCatalog:
    """In-memory catalog implementing EnrichmentClient.

    Queries found in `tracks` return that track, queries in `failing` raise
    APIError, anything else is a miss. Every query is recorded.
    """

    def __init__(
        self,
        tracks: dict[str, Track] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.tracks = tracks or {}
        self.failing = failing or set()
        self.queries: list[str] = []

    def search_track(self, query: str) -> Track | None:
        self.queries.append(query)
        if query in self.failing:
            raise APIError(f"Spotify search failed for {query}")
        return self.tracks.get(query)


class FakePlaylistSource:
    """Playlist source returning fixed entries."""

    def __init__(self, titles: list[str]) -> None:
        self.entries = [
            PlaylistEntry(title=title, video_id=f"vid{i}", position=i)
            for i, title in enumerate(titles)
        ]
        self.requested: list[str] = []

    def get_playlist_items(self, playlist_id: str) -> list[PlaylistEntry]:
        self.requested.append(playlist_id)
        return list(self.entries)


class FakeSleep:
    """Records sleep calls instead of sleeping."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def playlist_url() -> str:
    """A valid YouTube playlist URL."""
    return "https://www.youtube.com/playlist?list=PLtest_123-abc"


@pytest.fixture
def hit_track() -> Track:
    """A Spotify track with two artists."""
    return Track(
        name="Hit Song",
        id="track123",
        artists=[Artist(name="Artist One"), Artist(name="Artist Two")],
        album=AlbumRef(name="Greatest Hits", id="album123"),
    )


@pytest.fixture
def fake_sleep() -> FakeSleep:
    """A sleep function that only records calls."""
    return FakeSleep()


@pytest.fixture
def make_catalog() -> Callable[..., FakeCatalog]:
    """Factory for fake catalogs."""
    return FakeCatalog


@pytest.fixture
def make_source() -> Callable[[list[str]], FakePlaylistSource]:
    """Factory for fake playlist sources."""
    return FakePlaylistSource


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for mocked requests.Response objects."""

    def _make(status_code: int = 200, payload: Any = None) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.ok = status_code < 400
        if isinstance(payload, Exception):
            response.json.side_effect = payload
        else:
            response.json.return_value = payload if payload is not None else {}
        return response

    return _make
