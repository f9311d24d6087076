"""Business logic services for songlist.

Public API:
    PlaylistExtractorService - Fetch a playlist and resolve every entry
    SongResolver - Clean, search and fall back for a single title
    RateLimitedResolver - Sequential resolution with a fixed inter-item delay
"""

from songlist.services.extractor import PlaylistExtractorService
from songlist.services.resolver import RateLimitedResolver, SongResolver

__all__ = [
    "PlaylistExtractorService",
    "RateLimitedResolver",
    "SongResolver",
]
