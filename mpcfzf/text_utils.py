"""Text helpers for building and parsing picker lines."""

import re
from typing import Iterable, List

from .dataclasses import AlbumEntry

# "Artist - Album [Year]"; artist stops at the first " - "
ALBUM_ENTRY_RE = re.compile(r'^(?P<artist>.*?) - (?P<album>.*) \[(?P<year>\d{4})\]$')

YEAR_RE = re.compile(r'\d{4}')


def sort_unique(lines: Iterable[str]) -> List[str]:
    """Dedupe and sort lines case-insensitively.

    Only line endings are removed, surrounding spaces are part of the tag
    value. Blank lines are dropped. Lines that differ only in case are both
    kept; ties are ordered by the original string so the result is stable.
    """
    unique = {line.rstrip('\r\n') for line in lines if line and line.strip()}
    return sorted(unique, key=lambda line: (line.casefold(), line))


def extract_year(date: str) -> str:
    """Pull the first four-digit year out of an MPD date tag."""
    if not date:
        return ""
    match = YEAR_RE.search(date)
    return match.group(0) if match else ""


def format_album_entry(artist: str, album: str, year: str = "") -> str:
    """Build an "Artist - Album [Year]" line, omitting the year when unknown."""
    if year:
        return f"{artist} - {album} [{year}]"
    return f"{artist} - {album}"


def parse_album_entry(line: str) -> AlbumEntry:
    """Split an artist-album line back into its fields.

    Args:
        line: Line as produced by format_album_entry

    Returns:
        AlbumEntry; year is empty when the line has no "[Year]" suffix
    """
    line = line.rstrip('\r\n')

    match = ALBUM_ENTRY_RE.match(line)
    if match:
        return AlbumEntry(
            artist=match.group('artist'),
            album=match.group('album'),
            year=match.group('year'),
        )

    # Fallback: naive split on the first separator
    artist, sep, album = line.partition(' - ')
    if not sep:
        return AlbumEntry(artist=line, album='')
    return AlbumEntry(artist=artist, album=album)
