"""Video title cleaning.

Strips the decoration YouTube uploaders add around a song title so the
remainder can be used as a search query or split into artist and song.
"""

import re

# Qualifiers that end the meaningful part of a title when bracketed
_QUALIFIERS = (
    r"Official|Official Video|Official Audio|Official Music Video|Lyric Video"
    r"|Audio|Video|Music Video|Official Visualizer|Lyrics?"
)

# Applied in order; each pattern is replaced with an empty string
_CLEANUP_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "[Official Video] ..." and everything after it
    re.compile(rf"\s*\[(?:{_QUALIFIERS})\].*$", re.IGNORECASE),
    # "(Official Video) ..." and everything after it
    re.compile(rf"\s*\((?:{_QUALIFIERS})\).*$", re.IGNORECASE),
    # Full-width bracket annotations
    re.compile(r"\s*【.*】"),
    # Camera emoji trailers
    re.compile(r"\s*🎥.*$"),
    # Director/producer credit trailers
    re.compile(r"\s*(?:Dir\.|Directed|Prod\.|Produced).*$", re.IGNORECASE),
    # Director credits inside brackets or parentheses, anywhere
    re.compile(r"\s*\[.*Dir\..*\]", re.IGNORECASE),
    re.compile(r"\s*\(.*Dir\..*\)", re.IGNORECASE),
)

_WHITESPACE = re.compile(r"\s+")


def clean_title(title: str) -> str:
    """Remove decoration from a YouTube video title.

    Args:
        title: Raw video title.

    Returns:
        Cleaned title with collapsed whitespace. May be empty.

    Example:
        >>> clean_title("Song Title [Official Video]")
        'Song Title'
        >>> clean_title("Artist - Track (Lyric Video) 🎥 extra")
        'Artist - Track'
    """
    if not title:
        return ""

    cleaned = title
    for pattern in _CLEANUP_PATTERNS:
        cleaned = pattern.sub("", cleaned)

    return _WHITESPACE.sub(" ", cleaned).strip()


def simplify_query(query: str) -> str:
    """Replace hyphens with spaces for a second, looser catalog search.

    Only the ASCII hyphen is replaced; en and em dashes are kept.
    """
    return query.replace("-", " ")
