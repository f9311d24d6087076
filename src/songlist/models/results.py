"""Extraction result models and statistics."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from songlist.models.enums import Confidence, SkipReason
from songlist.models.song import ResolvedSong


class ExtractionResult(BaseModel):
    """Result of a complete playlist extraction.

    Attributes:
        playlist_id: The YouTube playlist ID.
        songs: Resolved songs in playlist order.
        skipped_by_reason: Count of skipped entries by reason.
        enriched: Whether Spotify enrichment was active for the run.

    Example:
        >>> result = extractor.extract_all(url)
        >>> result.high_count, result.medium_count, result.low_count
        (12, 5, 1)
    """

    model_config = ConfigDict(frozen=True)

    playlist_id: str
    songs: list[ResolvedSong] = Field(default_factory=list)
    skipped_by_reason: dict[SkipReason, int] = Field(default_factory=dict)
    enriched: bool = False

    def count(self, confidence: Confidence) -> int:
        """Number of songs resolved with the given confidence."""
        return sum(1 for s in self.songs if s.confidence == confidence)

    @property
    def high_count(self) -> int:
        return self.count(Confidence.HIGH)

    @property
    def medium_count(self) -> int:
        return self.count(Confidence.MEDIUM)

    @property
    def low_count(self) -> int:
        return self.count(Confidence.LOW)

    @property
    def skipped(self) -> int:
        """Total skipped entries across all reasons."""
        return sum(self.skipped_by_reason.values())
