"""Data models for songlist.

Public API:
    ResolvedSong - Song/artist pair with its confidence tier
    PlaylistEntry - A video in a YouTube playlist
    Confidence - Confidence tier enum (HIGH/MEDIUM/LOW)

Internal (not exported):
    youtube.py - Models for parsing YouTube Data API responses
    spotify.py - Models for parsing Spotify Web API responses
"""

from songlist.models.enums import Confidence, SkipReason
from songlist.models.song import PlaylistEntry, ResolvedSong

__all__ = [
    "Confidence",
    "PlaylistEntry",
    "ResolvedSong",
    "SkipReason",
]
