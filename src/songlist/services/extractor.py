"""Playlist extraction service."""

import logging
import time
from collections.abc import Callable, Iterator

from songlist.clients.youtube import PlaylistSourceProtocol
from songlist.models.enums import SkipReason
from songlist.models.progress import ResolveProgress
from songlist.models.results import ExtractionResult
from songlist.models.song import PlaylistEntry, ResolvedSong
from songlist.services.resolver import RateLimitedResolver, SongResolver
from songlist.utils.url import parse_playlist_id

logger = logging.getLogger(__name__)

# Placeholder titles YouTube shows for videos that are no longer watchable
SENTINEL_TITLES: dict[str, SkipReason] = {
    "Private video": SkipReason.PRIVATE,
    "Deleted video": SkipReason.DELETED,
}


def skip_reason_for(entry: PlaylistEntry) -> SkipReason | None:
    """Return why an entry should be skipped, or None to resolve it.

    Only exact sentinel titles are skipped.
    """
    return SENTINEL_TITLES.get(entry.title)


class PlaylistExtractorService:
    """Service for extracting song lists from YouTube playlists.

    Fetches every entry of the playlist, drops private and deleted videos,
    and resolves the rest in playlist order through a RateLimitedResolver.
    """

    def __init__(
        self,
        playlist_client: PlaylistSourceProtocol,
        resolver: SongResolver,
        *,
        delay: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the service.

        Args:
            playlist_client: Source of playlist entries.
            resolver: Title resolver (with or without catalog enrichment).
            delay: Seconds between entries while enrichment is active.
                Defaults to the resolver's configured delay.
            sleep: Sleep function (injectable for tests).
        """
        self._playlist_client = playlist_client
        self._resolver = resolver
        self._delay = delay
        self._sleep = sleep

    @property
    def enrichment_enabled(self) -> bool:
        return self._resolver.enrichment_enabled

    def extract(self, url: str) -> Iterator[ResolveProgress]:
        """Extract songs from a playlist URL with progress updates.

        Args:
            url: YouTube playlist URL containing a list= parameter.

        Yields:
            ResolveProgress for each playlist entry, in playlist order.
            The song field is None for skipped entries.

        Raises:
            PlaylistParseError: If URL has no playlist ID.
            PlaylistNotFoundError: If the playlist doesn't exist.
            AuthenticationError: If the YouTube API key is rejected.
            APIError: If playlist retrieval fails.
        """
        yield from self.extract_playlist(parse_playlist_id(url))

    def extract_playlist(self, playlist_id: str) -> Iterator[ResolveProgress]:
        """Extract songs from an already parsed playlist ID.

        Raises:
            Same exceptions as extract(), except PlaylistParseError.
        """
        logger.debug("Extracting songs for playlist: %s", playlist_id)

        entries = self._playlist_client.get_playlist_items(playlist_id)
        total = len(entries)
        logger.debug("Processing %d entries", total)

        resolver = RateLimitedResolver(self._resolver, self._delay, self._sleep)
        skipped_by_reason: dict[SkipReason, int] = {}

        for index, entry in enumerate(entries, 1):
            song: ResolvedSong | None = None
            reason = skip_reason_for(entry)

            if reason is not None:
                skipped_by_reason[reason] = skipped_by_reason.get(reason, 0) + 1
                logger.debug("[%d/%d] Skipping %s", index, total, reason.label)
            else:
                logger.info("[%d/%d] Processing: %s", index, total, entry.title)
                song = resolver.resolve(entry.title)

            yield ResolveProgress(
                current=index,
                total=total,
                entry=entry,
                song=song,
                skipped_by_reason=dict(skipped_by_reason),
            )

    def extract_all(self, url: str) -> ExtractionResult:
        """Extract songs from a playlist URL, returning the complete result.

        Args:
            url: YouTube playlist URL containing a list= parameter.

        Returns:
            ExtractionResult with songs in playlist order and skip counts.

        Raises:
            Same exceptions as extract().
        """
        playlist_id = parse_playlist_id(url)
        songs: list[ResolvedSong] = []
        skipped_by_reason: dict[SkipReason, int] = {}

        for progress in self.extract_playlist(playlist_id):
            if progress.song is not None:
                songs.append(progress.song)
            skipped_by_reason = progress.skipped_by_reason

        return ExtractionResult(
            playlist_id=playlist_id,
            songs=songs,
            skipped_by_reason=skipped_by_reason,
            enriched=self.enrichment_enabled,
        )
