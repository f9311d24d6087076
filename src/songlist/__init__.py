"""songlist - Extract song lists from YouTube playlists.

This library turns the video titles of a YouTube playlist into song/artist
pairs. Titles are cleaned, looked up in the Spotify catalog when
credentials are available, and otherwise split heuristically. Each result
carries a confidence tier (high, medium, low).

Examples:
    Extract a playlist without Spotify enrichment:
    ```python
    from songlist import create_extractor

    extractor = create_extractor(youtube_api_key="...")
    for progress in extractor.extract("https://www.youtube.com/playlist?list=..."):
        if progress.song:
            print(f"{progress.song.song} - {progress.song.artist}")
    ```

    Extract with enrichment and write the report:
    ```python
    from songlist import create_extractor, write_report

    extractor = create_extractor(
        youtube_api_key="...",
        spotify_client_id="...",
        spotify_client_secret="...",
    )
    result = extractor.extract_all(url)
    write_report(result.songs)
    ```
"""

from songlist.clients import SpotifyClient, YouTubeClient, create_enrichment_client
from songlist.config import APIConfig, ResolverConfig
from songlist.exceptions import (
    APIError,
    AuthenticationError,
    MissingCredentialsError,
    PlaylistNotFoundError,
    PlaylistParseError,
    SonglistError,
)
from songlist.lib.parsing import fallback_parse
from songlist.models.enums import Confidence, SkipReason
from songlist.models.progress import ResolveProgress
from songlist.models.results import ExtractionResult
from songlist.models.song import PlaylistEntry, ResolvedSong
from songlist.services import (
    PlaylistExtractorService,
    RateLimitedResolver,
    SongResolver,
)
from songlist.utils import clean_title, generate_report, write_report


def create_resolver(
    spotify_client_id: str | None = None,
    spotify_client_secret: str | None = None,
    api_config: APIConfig | None = None,
    resolver_config: ResolverConfig | None = None,
) -> SongResolver:
    """Create a title resolver, with Spotify enrichment when possible.

    The Spotify token is acquired here, once. Missing or rejected
    credentials produce a resolver without enrichment.

    Args:
        spotify_client_id: Optional Spotify application client ID.
        spotify_client_secret: Optional Spotify application client secret.
        api_config: Optional API configuration.
        resolver_config: Optional resolver configuration.

    Returns:
        A configured SongResolver instance.
    """
    catalog = create_enrichment_client(
        spotify_client_id, spotify_client_secret, config=api_config
    )
    return SongResolver(catalog, config=resolver_config)


def create_extractor(
    youtube_api_key: str,
    spotify_client_id: str | None = None,
    spotify_client_secret: str | None = None,
    api_config: APIConfig | None = None,
    resolver_config: ResolverConfig | None = None,
) -> PlaylistExtractorService:
    """Create a configured playlist extractor.

    This is the recommended way to create an extractor for library usage.
    It handles client instantiation and Spotify token acquisition internally.

    Args:
        youtube_api_key: YouTube Data API key.
        spotify_client_id: Optional Spotify application client ID.
        spotify_client_secret: Optional Spotify application client secret.
        api_config: Optional API configuration. Uses defaults if not provided.
        resolver_config: Optional resolver configuration.

    Returns:
        A configured PlaylistExtractorService instance.
    """
    playlist_client = YouTubeClient(youtube_api_key, config=api_config)
    resolver = create_resolver(
        spotify_client_id,
        spotify_client_secret,
        api_config=api_config,
        resolver_config=resolver_config,
    )
    return PlaylistExtractorService(playlist_client, resolver)


__all__ = [
    "APIConfig",
    "APIError",
    "AuthenticationError",
    "Confidence",
    "ExtractionResult",
    "MissingCredentialsError",
    "PlaylistEntry",
    "PlaylistExtractorService",
    "PlaylistNotFoundError",
    "PlaylistParseError",
    "RateLimitedResolver",
    "ResolveProgress",
    "ResolvedSong",
    "ResolverConfig",
    "SkipReason",
    "SongResolver",
    "SonglistError",
    "SpotifyClient",
    "YouTubeClient",
    "clean_title",
    "create_extractor",
    "create_resolver",
    "fallback_parse",
    "generate_report",
    "write_report",
]
