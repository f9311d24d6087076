"""Models for parsing YouTube Data API responses.

These are internal models used to parse and validate responses from
the playlistItems endpoint. They may change if the API changes.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "PlaylistItem",
    "PlaylistItemsPage",
    "ResourceId",
    "Snippet",
]


class YouTubeModel(BaseModel):
    """Base model for YouTube Data API responses."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class ResourceId(YouTubeModel):
    """Reference to the video behind a playlist item."""

    video_id: str | None = Field(default=None, alias="videoId")


class Snippet(YouTubeModel):
    """Playlist item snippet (part=snippet)."""

    title: str = ""
    position: int | None = None
    channel_title: str | None = Field(default=None, alias="videoOwnerChannelTitle")
    resource_id: ResourceId | None = Field(default=None, alias="resourceId")


class PlaylistItem(YouTubeModel):
    """Item in a playlistItems page."""

    id: str | None = None
    snippet: Snippet


class PlaylistItemsPage(YouTubeModel):
    """One page returned by playlistItems.list."""

    items: list[PlaylistItem] = Field(default_factory=list)
    next_page_token: str | None = Field(default=None, alias="nextPageToken")
