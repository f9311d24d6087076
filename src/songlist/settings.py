"""Application settings using pydantic-settings."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from songlist.config import APIConfig, ResolverConfig
from songlist.exceptions import MissingCredentialsError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # YouTube Data API key (required, set via YOUTUBE_API_KEY)
    youtube_api_key: str = Field(description="YouTube Data API key")

    # Spotify client credentials (optional, enable enrichment)
    spotify_client_id: str | None = Field(
        default=None, description="Spotify application client ID"
    )
    spotify_client_secret: str | None = Field(
        default=None, description="Spotify application client secret"
    )

    request_timeout: float = Field(
        default=20.0, gt=0, description="HTTP request timeout in seconds"
    )
    rate_limit_delay: float = Field(
        default=0.1,
        ge=0,
        description="Delay between entries while Spotify enrichment is active",
    )

    @field_validator("youtube_api_key")
    @classmethod
    def non_empty_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("spotify_client_id", "spotify_client_secret")
    @classmethod
    def blank_as_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def spotify_enabled(self) -> bool:
        return bool(self.spotify_client_id and self.spotify_client_secret)

    @property
    def api_config(self) -> APIConfig:
        return APIConfig(timeout=self.request_timeout)

    @property
    def resolver_config(self) -> ResolverConfig:
        return ResolverConfig(rate_limit_delay=self.rate_limit_delay)


def load_settings(**overrides: object) -> Settings:
    """Load settings from the environment and the .env file.

    Args:
        **overrides: Explicit values taking precedence over the environment.

    Returns:
        Validated Settings instance.

    Raises:
        MissingCredentialsError: If the YouTube API key is missing or invalid.
    """
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        if "youtube_api_key" in fields:
            raise MissingCredentialsError(
                "YouTube API key not found. "
                "Please add YOUTUBE_API_KEY to your environment or .env file."
            ) from e
        raise MissingCredentialsError(
            f"Invalid configuration for: {', '.join(fields)}"
        ) from e
