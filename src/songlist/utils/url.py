"""URL parsing utilities."""

import re

from songlist.exceptions import PlaylistParseError

PLAYLIST_ID_PATTERN = re.compile(r"[&?]list=([A-Za-z0-9_-]+)")

# Maximum URL length to prevent potential abuse (standard browser limit)
MAX_URL_LENGTH = 2048


def parse_playlist_id(url: str) -> str:
    """Extract playlist ID from a YouTube playlist URL.

    Args:
        url: Full YouTube or YouTube Music URL with a list= query parameter.

    Returns:
        The playlist ID string.

    Raises:
        PlaylistParseError: If playlist ID cannot be extracted or URL is too long.
    """
    if not url or len(url) > MAX_URL_LENGTH:
        raise PlaylistParseError("Invalid playlist URL format")
    if match := PLAYLIST_ID_PATTERN.search(url.strip()):
        return match.group(1)
    raise PlaylistParseError("Invalid playlist URL format")


def is_playlist_url(url: str) -> bool:
    """Check if URL carries a playlist ID.

    Args:
        url: YouTube or YouTube Music URL.

    Returns:
        True if a playlist ID can be extracted, False otherwise.
    """
    try:
        parse_playlist_id(url)
    except PlaylistParseError:
        return False
    return True
