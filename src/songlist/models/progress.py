"""Progress tracking models for playlist extraction."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from songlist.models.enums import SkipReason
from songlist.models.song import PlaylistEntry, ResolvedSong


class ResolveProgress(BaseModel):
    """Progress update during playlist extraction.

    Yielded by PlaylistExtractorService.extract() once per playlist entry.

    Attributes:
        current: Number of entries processed so far (1-indexed), skipped included.
        total: Total number of entries in the playlist.
        entry: The playlist entry that was processed.
        song: Resolved song, or None if the entry was skipped.
        skipped_by_reason: Running breakdown of skipped entries by reason.
    """

    model_config = ConfigDict(frozen=True)

    current: int
    total: int
    entry: PlaylistEntry
    song: ResolvedSong | None
    skipped_by_reason: dict[SkipReason, int] = Field(default_factory=dict)

    @property
    def skipped(self) -> int:
        """Total skipped entries across all skip reasons."""
        return sum(self.skipped_by_reason.values())
