"""Tests for exceptions."""

import pytest
from songlist.exceptions import (
    APIError,
    AuthenticationError,
    MissingCredentialsError,
    PlaylistNotFoundError,
    PlaylistParseError,
    SonglistError,
)


class TestExceptionStatusCodes:
    """Tests for HTTP status codes on exceptions."""

    @pytest.mark.parametrize(
        ("exception_class", "expected_status"),
        [
            (SonglistError, 500),
            (MissingCredentialsError, 500),
            (PlaylistParseError, 400),
            (AuthenticationError, 401),
            (PlaylistNotFoundError, 404),
            (APIError, 502),
        ],
        ids=["base_error", "credentials", "parse_error", "auth", "not_found", "api"],
    )
    def test_exception_status_codes(
        self, exception_class: type[SonglistError], expected_status: int
    ) -> None:
        """Each exception type should have the correct HTTP status code."""
        error = exception_class("test message")
        assert error.status_code == expected_status


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "exception_class",
        [
            MissingCredentialsError,
            PlaylistParseError,
            AuthenticationError,
            PlaylistNotFoundError,
            APIError,
        ],
    )
    def test_catch_all_with_base_class(
        self, exception_class: type[SonglistError]
    ) -> None:
        """Should be able to catch all errors with SonglistError."""
        with pytest.raises(SonglistError) as exc_info:
            raise exception_class("test message")
        assert exc_info.value.message == "test message"

    def test_exception_message_attribute(self) -> None:
        """Exceptions should have message attribute and string representation."""
        error = SonglistError("test message")
        assert error.message == "test message"
        assert str(error) == "test message"
