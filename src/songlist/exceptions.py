"""Custom exceptions for songlist.

All exceptions include an HTTP status_code attribute mirroring the
upstream failure they represent.
"""


class SonglistError(Exception):
    """Base exception for songlist.

    Attributes:
        status_code: HTTP status code describing the failure.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingCredentialsError(SonglistError):
    """Mandatory credentials are not configured.

    Raised at startup when YOUTUBE_API_KEY is absent, before any work is done.
    """

    status_code: int = 500  # Internal Server Error


class PlaylistParseError(SonglistError):
    """Failed to parse playlist URL.

    Raised when the provided URL doesn't contain a valid playlist ID.
    """

    status_code: int = 400  # Bad Request


class PlaylistNotFoundError(SonglistError):
    """Playlist not found or inaccessible."""

    status_code: int = 404  # Not Found


class AuthenticationError(SonglistError):
    """Credentials were rejected by an upstream API.

    Raised for an invalid YouTube API key or a failed Spotify
    client-credentials exchange.
    """

    status_code: int = 401  # Unauthorized


class APIError(SonglistError):
    """Upstream API error.

    Raised when an HTTP request to YouTube or Spotify fails.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)
