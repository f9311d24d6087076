"""Title-to-song resolution pipeline."""

import logging
import time
from collections.abc import Callable, Iterable, Iterator

from songlist.clients.spotify import EnrichmentClient
from songlist.config import ResolverConfig
from songlist.exceptions import SonglistError
from songlist.lib.parsing import fallback_parse
from songlist.models.enums import Confidence
from songlist.models.song import ResolvedSong
from songlist.utils.title import clean_title, simplify_query

logger = logging.getLogger(__name__)


class SongResolver:
    """Resolve video titles into song/artist pairs.

    Pipeline Overview:
    ==================
    1. clean_title() - Strip decoration from the raw title
    2. search() - Look the cleaned title up in the catalog, retrying once
                  with hyphens replaced by spaces (HIGH confidence)
    3. fallback_parse() - Split the title on separators (MEDIUM) or keep
                  it whole with an unknown artist (LOW)

    Catalog lookups only happen when an enrichment client is provided.
    """

    def __init__(
        self,
        catalog: EnrichmentClient | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            catalog: Optional catalog client. None disables enrichment.
            config: Optional resolver configuration. Uses defaults if not provided.
        """
        self._catalog = catalog
        self._config = config or ResolverConfig()

    @property
    def enrichment_enabled(self) -> bool:
        """Whether catalog lookups are performed."""
        return self._catalog is not None

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def search(self, query: str) -> ResolvedSong | None:
        """Look up a query in the catalog.

        Failures are logged and treated like a miss, so a single bad lookup
        never aborts a run.

        Args:
            query: Cleaned title or simplified query.

        Returns:
            HIGH confidence ResolvedSong for the top match, or None on a miss,
            a failure, or when enrichment is disabled.
        """
        if self._catalog is None or not query:
            return None

        try:
            track = self._catalog.search_track(query)
        except SonglistError as e:
            logger.warning("Spotify search error for: %s (%s)", query, e)
            return None

        if track is None:
            return None

        return ResolvedSong(
            song=track.name,
            artist=track.artist_names,
            album=track.album.name if track.album else None,
            confidence=Confidence.HIGH,
        )

    def resolve(self, raw_title: str) -> ResolvedSong:
        """Resolve a raw video title.

        Args:
            raw_title: Video title as it appears in the playlist.

        Returns:
            ResolvedSong from the catalog when found, otherwise from
            fallback_parse().
        """
        cleaned = clean_title(raw_title)

        match = None
        if self.enrichment_enabled:
            match = self.search(cleaned)
            # Literal hyphen only; en/em dashes are left to the fallback parser
            if match is None and self._config.retry_simplified and "-" in cleaned:
                match = self.search(simplify_query(cleaned))

        if match is not None:
            logger.info("Found: %s", match.display)
            return match

        if self.enrichment_enabled:
            logger.info("No Spotify match, using fallback for: %s", cleaned)
        return fallback_parse(raw_title)


class RateLimitedResolver:
    """Sequential resolver with a fixed delay between entries.

    Titles are resolved one at a time, in order. When the wrapped resolver
    performs catalog lookups, `delay` seconds are slept between successive
    entries to respect upstream rate limits. Without enrichment no delay
    is applied.
    """

    def __init__(
        self,
        resolver: SongResolver,
        delay: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the rate-limited resolver.

        Args:
            resolver: The resolver to delegate to.
            delay: Seconds between entries. Defaults to the resolver's
                configured rate_limit_delay.
            sleep: Sleep function (injectable for tests).
        """
        self._resolver = resolver
        self._delay = resolver.config.rate_limit_delay if delay is None else delay
        self._sleep = sleep
        self._started = False

    @property
    def throttled(self) -> bool:
        """Whether a delay is inserted between entries."""
        return self._resolver.enrichment_enabled and self._delay > 0

    def resolve(self, raw_title: str) -> ResolvedSong:
        """Resolve one title, waiting first if a previous title was resolved."""
        if self._started and self.throttled:
            self._sleep(self._delay)
        self._started = True
        return self._resolver.resolve(raw_title)

    def resolve_all(self, titles: Iterable[str]) -> Iterator[ResolvedSong]:
        """Resolve titles in order, yielding each result as it completes.

        Args:
            titles: Raw video titles.

        Yields:
            One ResolvedSong per title, in input order.
        """
        for title in titles:
            yield self.resolve(title)
