"""HTTP clients for the upstream APIs.

Public API:
    YouTubeClient - Playlist retrieval from the YouTube Data API
    SpotifyClient - Track search against the Spotify Web API
    create_enrichment_client - Acquire a Spotify token, or None if unavailable
"""

from songlist.clients.spotify import (
    EnrichmentClient,
    SpotifyClient,
    acquire_token,
    create_enrichment_client,
)
from songlist.clients.youtube import PlaylistSourceProtocol, YouTubeClient

__all__ = [
    "EnrichmentClient",
    "PlaylistSourceProtocol",
    "SpotifyClient",
    "YouTubeClient",
    "acquire_token",
    "create_enrichment_client",
]
