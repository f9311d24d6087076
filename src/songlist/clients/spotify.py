"""Spotify Web API client for catalog enrichment."""

import base64
import logging
from typing import Protocol

import requests
from pydantic import ValidationError

from songlist.config import USER_AGENT, APIConfig
from songlist.exceptions import APIError, AuthenticationError, SonglistError
from songlist.models.spotify import SearchResponse, TokenResponse, Track

logger = logging.getLogger(__name__)

SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_SEARCH_URL = "https://api.spotify.com/v1/search"


class EnrichmentClient(Protocol):
    """Protocol for music catalog clients.

    This protocol enables dependency injection and testing.
    Implement this protocol to create mock catalogs for testing.
    """

    def search_track(self, query: str) -> Track | None:
        """Return the top track matching query, or None on zero results."""
        ...


def acquire_token(
    client_id: str,
    client_secret: str,
    session: requests.Session | None = None,
    timeout: float = 15.0,
) -> str:
    """Exchange client credentials for a bearer token.

    Args:
        client_id: Spotify application client ID.
        client_secret: Spotify application client secret.
        session: Optional requests session.
        timeout: Request timeout in seconds.

    Returns:
        The access token.

    Raises:
        AuthenticationError: If the credentials are rejected.
        APIError: If the token request fails.
    """
    http = session or requests.Session()
    credentials = base64.b64encode(f"{client_id}:{client_secret}".encode()).decode(
        "ascii"
    )
    headers = {
        "Authorization": f"Basic {credentials}",
        "Content-Type": "application/x-www-form-urlencoded",
        "User-Agent": USER_AGENT,
    }

    try:
        response = http.post(
            SPOTIFY_TOKEN_URL,
            data={"grant_type": "client_credentials"},
            headers=headers,
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise APIError(f"Spotify token request failed: {e}") from e

    if response.status_code in (400, 401):
        raise AuthenticationError("Spotify rejected the client credentials")
    if not response.ok:
        raise APIError(f"Spotify token request failed: HTTP {response.status_code}")

    try:
        return TokenResponse.model_validate(response.json()).access_token
    except (ValueError, ValidationError) as e:
        raise APIError(f"Malformed Spotify token response: {e}") from e


class SpotifyClient:
    """Production Spotify search client.

    Holds a bearer token acquired once per run; the token is never refreshed
    or replaced. Implements EnrichmentClient.
    """

    def __init__(
        self,
        token: str,
        config: APIConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: Bearer token from acquire_token().
            config: Optional API configuration. Uses defaults if not provided.
            session: Optional requests session. Creates one if not provided.
        """
        if not token:
            raise ValueError("token cannot be empty")
        self._token = token
        self._config = config or APIConfig()
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", USER_AGENT)

    @property
    def token(self) -> str:
        return self._token

    def search_track(self, query: str) -> Track | None:
        """Search the catalog for a track.

        Args:
            query: Free-text search query.

        Returns:
            The first track result, or None if there are no results.

        Raises:
            AuthenticationError: If the token is rejected.
            APIError: If the search request fails.
        """
        logger.debug("Searching Spotify: %s", query)
        params = {"q": query, "type": "track", "limit": self._config.search_limit}
        headers = {"Authorization": f"Bearer {self._token}"}

        try:
            response = self._session.get(
                SPOTIFY_SEARCH_URL,
                params=params,
                headers=headers,
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            raise APIError(f"Spotify search failed: {e}") from e

        if response.status_code == 401:
            raise AuthenticationError("Spotify token was rejected")
        if not response.ok:
            raise APIError(f"Spotify search failed: HTTP {response.status_code}")

        try:
            data = SearchResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise APIError(f"Malformed Spotify search response: {e}") from e

        if not data.tracks.items:
            return None
        return data.tracks.items[0]


def create_enrichment_client(
    client_id: str | None,
    client_secret: str | None,
    config: APIConfig | None = None,
    session: requests.Session | None = None,
) -> SpotifyClient | None:
    """Create a Spotify client if credentials are configured and accepted.

    Missing credentials or a failed token exchange disable enrichment
    rather than failing the run.

    Args:
        client_id: Spotify application client ID.
        client_secret: Spotify application client secret.
        config: Optional API configuration.
        session: Optional requests session shared by the token exchange and
            searches.

    Returns:
        A SpotifyClient holding the acquired token, or None.
    """
    if not client_id or not client_secret:
        logger.warning("Spotify credentials not found, skipping Spotify enrichment")
        return None

    config = config or APIConfig()
    session = session or requests.Session()
    try:
        token = acquire_token(client_id, client_secret, session, config.timeout)
    except SonglistError as e:
        logger.warning("Unable to connect to Spotify, skipping enrichment: %s", e)
        return None

    logger.info("Spotify enrichment enabled")
    return SpotifyClient(token, config=config, session=session)
