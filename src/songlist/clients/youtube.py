"""YouTube Data API client for playlist retrieval."""

import logging
from typing import Any, Protocol

import requests
from pydantic import ValidationError

from songlist.config import USER_AGENT, APIConfig
from songlist.exceptions import APIError, AuthenticationError, PlaylistNotFoundError
from songlist.models.song import PlaylistEntry
from songlist.models.youtube import PlaylistItem, PlaylistItemsPage

logger = logging.getLogger(__name__)

PLAYLIST_ITEMS_URL = "https://www.googleapis.com/youtube/v3/playlistItems"

# Google returns 400 for malformed or unknown API keys
_AUTH_REASONS = frozenset({"keyInvalid", "badRequest.keyInvalid", "API_KEY_INVALID"})


class PlaylistSourceProtocol(Protocol):
    """Protocol for playlist sources.

    This protocol enables dependency injection and testing.
    Implement this protocol to create fake playlist sources for testing.
    """

    def get_playlist_items(self, playlist_id: str) -> list[PlaylistEntry]:
        """Fetch every entry of a playlist, in playlist order."""
        ...


class YouTubeClient:
    """Production YouTube Data API client.

    Wraps the playlistItems endpoint with pagination, consistent error
    handling and response parsing. Implements PlaylistSourceProtocol.
    """

    def __init__(
        self,
        api_key: str,
        config: APIConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: YouTube Data API key.
            config: Optional API configuration. Uses defaults if not provided.
            session: Optional requests session. Creates one if not provided.
        """
        if not api_key or not api_key.strip():
            raise ValueError("api_key cannot be empty")
        self._api_key = api_key
        self._config = config or APIConfig()
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", USER_AGENT)

    def get_playlist_items(self, playlist_id: str) -> list[PlaylistEntry]:
        """Fetch all entries of a playlist, following page tokens.

        Args:
            playlist_id: YouTube playlist ID.

        Returns:
            Playlist entries in playlist order.

        Raises:
            ValueError: If playlist_id is empty.
            PlaylistNotFoundError: If the playlist doesn't exist or is private.
            AuthenticationError: If the API key is rejected.
            APIError: If an API request fails.
        """
        if not playlist_id or not playlist_id.strip():
            raise ValueError("playlist_id cannot be empty")

        logger.debug("Fetching playlist: %s", playlist_id)
        entries: list[PlaylistEntry] = []
        page_token = ""

        while True:
            page = self._fetch_page(playlist_id, page_token)
            entries.extend(self._to_entry(item) for item in page.items)
            logger.debug("Retrieving videos... (%d videos)", len(entries))

            if not page.next_page_token:
                break
            page_token = page.next_page_token

        logger.debug("Fetched playlist %s with %d entries", playlist_id, len(entries))
        return entries

    def _fetch_page(self, playlist_id: str, page_token: str) -> PlaylistItemsPage:
        """Fetch and parse a single playlistItems page."""
        params: dict[str, Any] = {
            "key": self._api_key,
            "playlistId": playlist_id,
            "part": "snippet",
            "maxResults": self._config.page_size,
        }
        if page_token:
            params["pageToken"] = page_token

        try:
            response = self._session.get(
                PLAYLIST_ITEMS_URL, params=params, timeout=self._config.timeout
            )
        except requests.RequestException as e:
            logger.warning("YouTube request failed for playlist %s: %s", playlist_id, e)
            raise APIError(f"Failed to retrieve playlist: {e}") from e

        self._raise_for_status(response, playlist_id)

        try:
            return PlaylistItemsPage.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Malformed playlist response for %s: %s", playlist_id, e)
            raise APIError(f"Failed to retrieve playlist: {e}") from e

    def _raise_for_status(self, response: requests.Response, playlist_id: str) -> None:
        """Map HTTP error responses to songlist exceptions."""
        if response.ok:
            return

        reason = self._error_reason(response)
        logger.warning(
            "YouTube API error for playlist %s: %s %s",
            playlist_id,
            response.status_code,
            reason,
        )

        if response.status_code == 404:
            raise PlaylistNotFoundError(f"Playlist not found: {playlist_id}")
        # Private playlists come back as 403 with a dedicated reason
        if reason == "playlistItemsNotAccessible":
            raise PlaylistNotFoundError(
                f"Playlist is private or not accessible: {playlist_id}"
            )
        if response.status_code in (401, 403) or reason in _AUTH_REASONS:
            raise AuthenticationError(
                f"YouTube API rejected the request ({reason or response.status_code}). "
                "Check that YOUTUBE_API_KEY is valid and has the YouTube Data API "
                "enabled."
            )
        raise APIError(
            f"Failed to retrieve playlist: HTTP {response.status_code} {reason}".rstrip()
        )

    @staticmethod
    def _error_reason(response: requests.Response) -> str:
        """Extract the error reason from a Google API error body.

        Returns an empty string when the body isn't a Google error payload.
        """
        try:
            error = response.json().get("error") or {}
        except ValueError:
            return ""
        if not isinstance(error, dict):
            return ""
        errors = error.get("errors") or []
        if errors and isinstance(errors[0], dict):
            return str(errors[0].get("reason") or "")
        return str(error.get("status") or "")

    @staticmethod
    def _to_entry(item: PlaylistItem) -> PlaylistEntry:
        snippet = item.snippet
        return PlaylistEntry(
            title=snippet.title,
            video_id=snippet.resource_id.video_id if snippet.resource_id else None,
            position=snippet.position,
            channel=snippet.channel_title,
        )
