"""Models for parsing Spotify Web API responses.

Internal models, only the fields used for enrichment are declared.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "AlbumRef",
    "Artist",
    "SearchResponse",
    "TokenResponse",
    "Track",
    "TrackPage",
]


class SpotifyModel(BaseModel):
    """Base model for Spotify Web API responses."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class TokenResponse(SpotifyModel):
    """Client-credentials token response."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 3600


class Artist(SpotifyModel):
    """Artist reference."""

    name: str
    id: str | None = None


class AlbumRef(SpotifyModel):
    """Album reference in a track object."""

    name: str
    id: str | None = None
    release_date: str | None = None


class Track(SpotifyModel):
    """Track object from a search result."""

    name: str
    id: str | None = None
    artists: list[Artist] = Field(default_factory=list)
    album: AlbumRef | None = None

    @property
    def artist_names(self) -> str:
        """Artist names joined with ', '."""
        return ", ".join(a.name for a in self.artists if a.name)


class TrackPage(SpotifyModel):
    """Paging object holding track results."""

    items: list[Track] = Field(default_factory=list)
    total: int = 0


class SearchResponse(SpotifyModel):
    """Response from /v1/search with type=track."""

    tracks: TrackPage = Field(default_factory=TrackPage)
