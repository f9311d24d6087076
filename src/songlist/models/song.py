"""Playlist entry and resolved song models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from songlist.models.enums import Confidence

UNKNOWN_ARTIST = "Unknown Artist"


class PlaylistEntry(BaseModel):
    """A single video in a YouTube playlist.

    Only the title drives resolution; the other fields are kept for display.

    Attributes:
        title: Video title as shown in the playlist.
        video_id: YouTube video ID (None for some removed videos).
        position: Zero-based position in the playlist.
        channel: Title of the channel that uploaded the video.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    video_id: str | None = None
    position: int | None = None
    channel: str | None = None


class ResolvedSong(BaseModel):
    """A song/artist pair resolved from a video title.

    Frozen: the confidence is assigned once by the stage that produced
    the record.
    """

    model_config = ConfigDict(frozen=True)

    song: str
    artist: str
    album: str | None = None
    confidence: Confidence

    @property
    def display(self) -> str:
        """Formatted 'Song - Artist' string."""
        return f"{self.song} - {self.artist}"
