"""Enumerations for songlist domain models."""

from enum import StrEnum


class Confidence(StrEnum):
    """How a song/artist pair was resolved.

    - HIGH: Spotify catalog match
    - MEDIUM: Separator pattern matched in the video title
    - LOW: No structure found, title used as-is
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def glyph(self) -> str:
        """Marker printed next to each report line."""
        match self:
            case Confidence.HIGH:
                return "🎯"
            case Confidence.MEDIUM:
                return "⚡"
            case Confidence.LOW:
                return "⚠️"

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        match self:
            case Confidence.HIGH:
                return "High confidence (Spotify match)"
            case Confidence.MEDIUM:
                return "Medium confidence (Pattern match)"
            case Confidence.LOW:
                return "Low confidence (Fallback)"


class SkipReason(StrEnum):
    """Reason why a playlist entry was skipped before resolution."""

    PRIVATE = "private"
    DELETED = "deleted"

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        match self:
            case SkipReason.PRIVATE:
                return "private video"
            case SkipReason.DELETED:
                return "deleted video"
