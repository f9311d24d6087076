"""Tests for the command-line interface."""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from songlist import cli
from songlist.exceptions import PlaylistNotFoundError
from songlist.models.song import PlaylistEntry
from songlist.utils.url import parse_playlist_id

PLAYLIST_URL = "https://www.youtube.com/playlist?list=PLcli"


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run the CLI with a YouTube key, no Spotify, in a temp directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("YOUTUBE_API_KEY", "yt-key")
    monkeypatch.delenv("SPOTIFY_CLIENT_ID", raising=False)
    monkeypatch.delenv("SPOTIFY_CLIENT_SECRET", raising=False)
    monkeypatch.setattr(cli, "create_enrichment_client", lambda *a, **kw: None)


@pytest.fixture
def fake_youtube(monkeypatch: pytest.MonkeyPatch, make_source):
    """Replace YouTubeClient with a fake playlist source."""
    source = make_source(["Artist - Track", "Private video", "Just A Title"])
    monkeypatch.setattr(cli, "YouTubeClient", lambda *a, **kw: source)
    return source


class TestMain:
    """Tests for the songlist command."""

    def test_writes_report(self, fake_youtube, tmp_path: Path) -> None:
        """Should resolve the playlist and write the report."""
        output = tmp_path / "songs.txt"

        result = CliRunner().invoke(
            cli.main, ["--url", PLAYLIST_URL, "--output", str(output)]
        )

        assert result.exit_code == 0, result.output
        content = output.read_text(encoding="utf-8")
        assert "Total Songs: 2" in content
        assert "1. Track - Artist ⚡" in content
        assert "2. Just A Title - Unknown Artist ⚠️" in content
        assert "Private video" not in content
        assert fake_youtube.requested == ["PLcli"]

    def test_prompts_for_url(self, fake_youtube, tmp_path: Path) -> None:
        """Should prompt for the URL when it isn't given."""
        result = CliRunner().invoke(cli.main, [], input=f"  {PLAYLIST_URL}  \n")

        assert result.exit_code == 0, result.output
        assert "Enter YouTube playlist URL" in result.output
        assert (tmp_path / "playlist_hybrid_result.txt").exists()
        assert fake_youtube.requested == ["PLcli"]

    def test_prints_statistics(self, fake_youtube) -> None:
        """Should print per-tier statistics."""
        result = CliRunner().invoke(cli.main, ["--url", PLAYLIST_URL])

        assert result.exit_code == 0, result.output
        assert "Extraction Statistics" in result.output
        assert "Results saved to" in result.output

    def test_missing_youtube_key(
        self, monkeypatch: pytest.MonkeyPatch, fake_youtube, tmp_path: Path
    ) -> None:
        """Should abort before prompting when the YouTube key is missing."""
        monkeypatch.delenv("YOUTUBE_API_KEY")

        result = CliRunner().invoke(cli.main, [])

        assert result.exit_code == 1
        assert "YOUTUBE_API_KEY" in result.output
        assert "Enter YouTube playlist URL" not in result.output
        assert fake_youtube.requested == []

    def test_invalid_url_writes_nothing(self, fake_youtube, tmp_path: Path) -> None:
        """Should abort on a URL without a playlist ID."""
        result = CliRunner().invoke(
            cli.main, ["--url", "https://www.youtube.com/watch?v=abc"]
        )

        assert result.exit_code == 1
        assert "Invalid playlist URL format" in result.output
        assert not (tmp_path / "playlist_hybrid_result.txt").exists()

    def test_playlist_failure_writes_nothing(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Should abort without a report when retrieval fails."""

        class MissingPlaylist:
            def get_playlist_items(self, playlist_id: str) -> list[PlaylistEntry]:
                raise PlaylistNotFoundError(f"Playlist not found: {playlist_id}")

        monkeypatch.setattr(cli, "YouTubeClient", lambda *a, **kw: MissingPlaylist())

        result = CliRunner().invoke(cli.main, ["--url", PLAYLIST_URL])

        assert result.exit_code == 1
        assert "Playlist not found: PLcli" in result.output
        assert not (tmp_path / "playlist_hybrid_result.txt").exists()

    def test_parses_playlist_id_once(self, fake_youtube) -> None:
        """Should parse the URL once and hand the ID to the service."""
        with (
            patch(
                "songlist.cli.parse_playlist_id", wraps=parse_playlist_id
            ) as cli_parse,
            patch("songlist.services.extractor.parse_playlist_id") as service_parse,
        ):
            result = CliRunner().invoke(cli.main, ["--url", PLAYLIST_URL])

        assert result.exit_code == 0, result.output
        cli_parse.assert_called_once_with(PLAYLIST_URL)
        service_parse.assert_not_called()
        assert fake_youtube.requested == ["PLcli"]
