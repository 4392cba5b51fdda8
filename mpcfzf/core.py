"""Mode listings and queue updates, independent of the CLI.

This module ties the list cache and the mpc client together so that each
selection mode can be listed (cached or fresh) and its selections queued.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from mpcfzf.cache_manager import ListCacheManager
from mpcfzf.dataclasses import MODES, PickerConfig
from mpcfzf.mpc import MpcClient
from mpcfzf.text_utils import format_album_entry, parse_album_entry, sort_unique


def validate_mode(mode: str) -> str:
    """Return mode unchanged, or raise ValueError for an unknown one."""
    if mode not in MODES:
        raise ValueError(f"Invalid mode: {mode!r} (expected one of {', '.join(MODES)})")
    return mode


class MpcFzf:
    """Lists MPD library entries per mode and queues selections."""

    def __init__(self, config: Optional[PickerConfig] = None, client: Optional[MpcClient] = None) -> None:
        self.config = config or PickerConfig()
        self.logger = logging.getLogger(__name__)

        self.client = client or MpcClient(
            self.config.mpc_command,
            host=self.config.mpd_host,
            port=self.config.mpd_port,
        )
        self._init_cache_manager()

    def _init_cache_manager(self) -> None:
        """Initialize list cache manager.

        Built even when caching is disabled so that clearing still reaches
        files left by earlier runs; cache_enabled only gates listing.
        """
        cache_dir = Path(self.config.cache_dir).expanduser()
        self.cache_manager = ListCacheManager(str(cache_dir), self.config.cache_ttl)

    def library_timestamp(self) -> Optional[float]:
        """When the MPD database last changed, as epoch seconds."""
        if self.config.mpd_db_file:
            db_file = Path(self.config.mpd_db_file).expanduser()
            try:
                return db_file.stat().st_mtime
            except OSError as e:
                self.logger.debug(f"Cannot stat MPD database {db_file}: {e}")
        return self.client.db_updated()

    def load_entries(self, mode: str, use_cache: bool = True) -> List[str]:
        """Get the picker lines for a mode.

        Args:
            mode: 'artist', 'directory' or 'artist-album'
            use_cache: Read and write the list cache

        Returns:
            Sorted, unique lines; empty when mpc returned nothing
        """
        validate_mode(mode)
        use_cache = use_cache and self.config.cache_enabled

        if use_cache:
            cached = self.cache_manager.get_cached_entries(mode, self.library_timestamp())
            if cached is not None:
                return cached

        entries = sort_unique(self._query(mode))
        self.logger.debug(f"Queried {len(entries)} {mode} entries from mpc")

        # Never cache an empty listing, mpc may just be unreachable
        if use_cache and entries:
            self.cache_manager.save_entries(mode, entries)

        return entries

    def _query(self, mode: str) -> List[str]:
        if mode == 'artist':
            return self.client.list_artists()
        if mode == 'directory':
            return self.client.list_directories()
        return self._query_artist_albums()

    def _query_artist_albums(self) -> List[str]:
        """Build "Artist - Album [Year]" lines from per-artist queries."""
        lines = []
        for artist in self.client.list_artists():
            for album in self.client.list_albums(artist):
                years = self.client.list_years(artist, album)
                # Earliest tagged year stands for the album
                year = years[0] if years else ''
                lines.append(format_album_entry(artist, album, year))
        return lines

    def add_selections(self, mode: str, selections: List[str], replace: bool = False) -> List[str]:
        """Add picked lines to the MPD queue.

        Args:
            mode: Mode the lines were picked in
            selections: Picked lines
            replace: Clear the queue first and start playback afterwards

        Returns:
            Lines that mpc accepted
        """
        validate_mode(mode)

        if replace:
            self.client.clear_queue()

        added = []
        for selection in selections:
            if self._add_one(mode, selection):
                added.append(selection)
            else:
                self.logger.warning(f"Could not add to queue: {selection}")

        if replace and added:
            self.client.play()

        return added

    def _add_one(self, mode: str, selection: str) -> bool:
        if mode == 'artist':
            return self.client.add_artist(selection)
        if mode == 'directory':
            return self.client.add_path(selection)

        entry = parse_album_entry(selection)
        if not entry.album:
            return self.client.add_artist(entry.artist)
        return self.client.add_album(entry.artist, entry.album)

    def update_library(self) -> int:
        """Rescan the library and drop every cached list."""
        self.client.update_library()
        return self.clear_cache()

    def invalidate(self, mode: str) -> bool:
        """Drop the cached list of one mode."""
        return self.cache_manager.invalidate(validate_mode(mode))

    def clear_cache(self) -> int:
        """Clear list cache and return number of files cleared."""
        return self.cache_manager.clear_cache()

    def get_cache_info(self) -> Dict[str, Any]:
        """Get cache statistics."""
        info = self.cache_manager.get_cache_info()
        info['cache_enabled'] = self.config.cache_enabled
        return info
