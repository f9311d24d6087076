"""Tests for factory functions and public API."""

from unittest.mock import patch

from songlist import (
    PlaylistExtractorService,
    SongResolver,
    create_extractor,
    create_resolver,
)


class TestCreateResolver:
    """Tests for create_resolver factory function."""

    def test_without_credentials(self) -> None:
        """Should create a resolver without enrichment."""
        resolver = create_resolver()

        assert isinstance(resolver, SongResolver)
        assert resolver.enrichment_enabled is False

    def test_with_credentials(self) -> None:
        """Should wire the Spotify client into the resolver."""
        with patch(
            "songlist.clients.spotify.acquire_token", return_value="tok"
        ) as acquire:
            resolver = create_resolver("id", "secret")

        acquire.assert_called_once()
        assert resolver.enrichment_enabled is True


class TestCreateExtractor:
    """Tests for create_extractor factory function."""

    def test_creates_extractor(self) -> None:
        """Should create an extractor without contacting any API."""
        extractor = create_extractor("yt-key")

        assert isinstance(extractor, PlaylistExtractorService)
        assert extractor.enrichment_enabled is False


class TestPublicAPI:
    """Tests for public API exports."""

    def test_all_expected_exports_available(self) -> None:
        """All documented exports should be available."""
        import songlist

        # Factory functions
        assert hasattr(songlist, "create_extractor")
        assert hasattr(songlist, "create_resolver")

        # Pipeline pieces
        assert hasattr(songlist, "clean_title")
        assert hasattr(songlist, "fallback_parse")
        assert hasattr(songlist, "SongResolver")
        assert hasattr(songlist, "RateLimitedResolver")
        assert hasattr(songlist, "PlaylistExtractorService")

        # Models
        assert hasattr(songlist, "ResolvedSong")
        assert hasattr(songlist, "Confidence")
        assert hasattr(songlist, "ExtractionResult")

        # Exceptions
        assert hasattr(songlist, "SonglistError")
        assert hasattr(songlist, "PlaylistParseError")

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ should be importable."""
        import songlist

        for name in songlist.__all__:
            assert hasattr(songlist, name), name
