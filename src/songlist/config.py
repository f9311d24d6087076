"""Configuration for songlist."""

from dataclasses import dataclass
from importlib.metadata import version

# Get version from package metadata for User-Agent
USER_AGENT = f"songlist/{version('songlist')}"


@dataclass(frozen=True)
class APIConfig:
    """Upstream API configuration.

    Attributes:
        page_size: Playlist items requested per YouTube page (API maximum is 50).
        search_limit: Number of Spotify search results requested.
        timeout: HTTP request timeout in seconds.
    """

    page_size: int = 50
    search_limit: int = 1
    timeout: float = 20.0


@dataclass(frozen=True)
class ResolverConfig:
    """Resolution pipeline configuration.

    Attributes:
        rate_limit_delay: Seconds to wait between entries when enrichment is active.
        retry_simplified: Whether to retry a missed search with hyphens removed.
    """

    rate_limit_delay: float = 0.1
    retry_simplified: bool = True
