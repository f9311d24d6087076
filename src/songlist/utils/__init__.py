"""Utility functions for songlist.

Available via `from songlist.utils import ...` for power users.
Not re-exported at the top-level `songlist` package.
"""

from songlist.utils.report import (
    DEFAULT_REPORT_FILENAME,
    generate_report,
    write_report,
)
from songlist.utils.title import clean_title, simplify_query
from songlist.utils.url import is_playlist_url, parse_playlist_id

__all__ = [
    "DEFAULT_REPORT_FILENAME",
    "clean_title",
    "generate_report",
    "is_playlist_url",
    "parse_playlist_id",
    "simplify_query",
    "write_report",
]
