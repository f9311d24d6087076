#!/usr/bin/env python3
"""Command-line interface for songlist.

Prompts for a YouTube playlist URL, resolves every video into a
song/artist pair and writes a plain-text report.
"""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from songlist.clients import YouTubeClient, create_enrichment_client
from songlist.exceptions import SonglistError
from songlist.models.enums import Confidence, SkipReason
from songlist.models.results import ExtractionResult
from songlist.models.song import ResolvedSong
from songlist.services import PlaylistExtractorService, SongResolver
from songlist.settings import load_settings
from songlist.utils.report import DEFAULT_REPORT_FILENAME, write_report
from songlist.utils.url import parse_playlist_id

logger = logging.getLogger("songlist")

# Using the same console for Progress and RichHandler ensures logs appear
# above the progress bar rather than interfering with it.
PROGRESS_COLUMNS = (
    SpinnerColumn(),
    TextColumn("[progress.description]{task.description}"),
    BarColumn(),
    TaskProgressColumn(),
    TimeElapsedColumn(),
)


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers before adding a new one, so it can be called
    again to switch to a shared Progress console.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def print_banner(console: Console) -> None:
    """Print the title and credential requirements."""
    console.print("[bold]🎵 YouTube + Spotify Hybrid Extractor[/bold]")
    console.rule(style="dim")
    console.print("📋 Setup Requirements:")
    console.print("1. YouTube API Key (required): YOUTUBE_API_KEY in .env")
    console.print("2. Spotify API (optional, for better accuracy):")
    console.print("   - SPOTIFY_CLIENT_ID in .env")
    console.print("   - SPOTIFY_CLIENT_SECRET in .env")
    console.print(
        "   - Get credentials from: https://developer.spotify.com/dashboard"
    )
    console.print()


def print_statistics(console: Console, result: ExtractionResult) -> None:
    """Print per-confidence counts for a finished extraction.

    Args:
        console: Rich console for output.
        result: The finished extraction.
    """
    table = Table(
        show_header=False,
        padding=(0, 1),
        title="[bold yellow]📊 Extraction Statistics[/bold yellow]",
        title_justify="left",
    )
    table.add_column("Tier", style="bold cyan")
    table.add_column("Count", justify="right")

    for confidence in Confidence:
        table.add_row(
            f"{confidence.glyph} {confidence.label}", str(result.count(confidence))
        )
    table.add_row("📝 Total songs", str(len(result.songs)))
    if result.skipped:
        table.add_row("[dim]Skipped (private/deleted)[/dim]", str(result.skipped))

    console.print()
    console.print(table)


@click.command()
@click.option("--url", default=None, help="YouTube playlist URL (prompted if omitted).")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_REPORT_FILENAME,
    show_default=True,
    help="Report file to write.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(url: str | None, output: Path, verbose: bool) -> None:
    """Extract a song/artist list from a YouTube playlist.

    Titles are matched against Spotify when SPOTIFY_CLIENT_ID and
    SPOTIFY_CLIENT_SECRET are set, and parsed from the title otherwise.

    \b
    Examples:
      songlist
      songlist --url "https://www.youtube.com/playlist?list=PLxxx"
      songlist --url "https://www.youtube.com/playlist?list=PLxxx" -o songs.txt
    """
    console = Console()
    setup_logging(verbose=verbose, console=console)
    print_banner(console)

    try:
        settings = load_settings()
    except SonglistError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    if not url:
        url = click.prompt("🔗 Enter YouTube playlist URL").strip()

    try:
        playlist_id = parse_playlist_id(url)
        console.print("🚀 Starting hybrid extraction...")
        catalog = create_enrichment_client(
            settings.spotify_client_id,
            settings.spotify_client_secret,
            config=settings.api_config,
        )
        service = PlaylistExtractorService(
            YouTubeClient(settings.youtube_api_key, config=settings.api_config),
            SongResolver(catalog, config=settings.resolver_config),
        )

        songs: list[ResolvedSong] = []
        skipped_by_reason: dict[SkipReason, int] = {}

        with Progress(*PROGRESS_COLUMNS, console=console) as progress:
            task = progress.add_task("🎵 Processing songs", total=None)
            for p in service.extract_playlist(playlist_id):
                progress.update(task, completed=p.current, total=p.total)
                if p.song is not None:
                    songs.append(p.song)
                skipped_by_reason = p.skipped_by_reason

        result = ExtractionResult(
            playlist_id=playlist_id,
            songs=songs,
            skipped_by_reason=skipped_by_reason,
            enriched=service.enrichment_enabled,
        )
        path = write_report(result.songs, output)

    except SonglistError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e

    print_statistics(console, result)
    console.print(f"\n[green]✅ Results saved to: {path}[/green]")


if __name__ == "__main__":
    main()
