"""Plain-text report generation.

Reports are written with UTF-8 encoding since confidence markers are emoji.
"""

import logging
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from songlist.models.enums import Confidence
from songlist.models.song import ResolvedSong

logger = logging.getLogger(__name__)

DEFAULT_REPORT_FILENAME = "playlist_hybrid_result.txt"
REPORT_HEADER = "=== HYBRID YOUTUBE + SPOTIFY EXTRACTION ==="


def _format_date(value: date) -> str:
    """Format a date as M/D/YYYY (no zero padding)."""
    return f"{value.month}/{value.day}/{value.year}"


def generate_report(
    songs: Sequence[ResolvedSong], created: date | None = None
) -> str:
    """Generate report content for a list of resolved songs.

    Args:
        songs: Resolved songs in playlist order.
        created: Creation date shown in the header. Defaults to today.

    Returns:
        Report content as a string.

    Example:
        >>> print(generate_report([song], created=date(2024, 3, 7)))
        === HYBRID YOUTUBE + SPOTIFY EXTRACTION ===
        Total Songs: 1
        Created: 3/7/2024
        <BLANKLINE>
        1. Airbag - Radiohead 🎯
        <BLANKLINE>
        Legend:
        🎯 = High confidence (Spotify match)
        ⚡ = Medium confidence (Pattern match)
        ⚠️ = Low confidence (Fallback)
    """
    lines = [
        REPORT_HEADER,
        f"Total Songs: {len(songs)}",
        f"Created: {_format_date(created or date.today())}",
        "",
    ]

    for index, song in enumerate(songs, 1):
        lines.append(f"{index}. {song.song} - {song.artist} {song.confidence.glyph}")

    lines.append("")
    lines.append("Legend:")
    lines.extend(f"{c.glyph} = {c.label}" for c in Confidence)

    return "\n".join(lines)


def write_report(
    songs: Sequence[ResolvedSong],
    path: Path | str = DEFAULT_REPORT_FILENAME,
    created: date | None = None,
) -> Path:
    """Write the report to a file.

    Creates the parent directory if it doesn't exist.

    Args:
        songs: Resolved songs in playlist order.
        path: Destination file. Defaults to DEFAULT_REPORT_FILENAME.
        created: Creation date shown in the header. Defaults to today.

    Returns:
        Path to the written report.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_report(songs, created), encoding="utf-8")
    logger.info("Results saved to: %s", path)
    return path
