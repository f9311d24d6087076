"""Heuristic artist/song parsing for titles without a catalog match."""

import re

from songlist.models.enums import Confidence
from songlist.models.song import UNKNOWN_ARTIST, ResolvedSong
from songlist.utils.title import clean_title

# Tried in order: "Artist - Song" (hyphen, en dash or em dash), then "Artist : Song"
SEPARATOR_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(.+?)\s*[-–—]\s*(.+)$"),
    re.compile(r"^(.+?)\s*:\s*(.+)$"),
)


def split_artist_song(title: str) -> tuple[str, str] | None:
    """Split an already cleaned title on the first known separator.

    Args:
        title: Cleaned video title.

    Returns:
        (artist, song) tuple, or None if no separator pattern matches.
    """
    for pattern in SEPARATOR_PATTERNS:
        if match := pattern.match(title):
            return match.group(1).strip(), match.group(2).strip()
    return None


def fallback_parse(title: str) -> ResolvedSong:
    """Parse a raw video title into a song/artist pair without the catalog.

    Never fails: titles without a recognizable separator are returned as the
    song with an unknown artist.

    Args:
        title: Raw video title (cleaned here before parsing).

    Returns:
        ResolvedSong with MEDIUM confidence when a separator matched,
        LOW otherwise.
    """
    cleaned = clean_title(title)

    if parts := split_artist_song(cleaned):
        artist, song = parts
        return ResolvedSong(song=song, artist=artist, confidence=Confidence.MEDIUM)

    return ResolvedSong(song=cleaned, artist=UNKNOWN_ARTIST, confidence=Confidence.LOW)
