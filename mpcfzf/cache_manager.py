"""Flat-file list caching for picker modes."""

import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional


class ListCacheManager:
    """Caches one sorted list of picker lines per mode.

    Each mode is a plain text file with one entry per line. An entry is stale
    once the file is older than the TTL or older than the MPD database.
    """

    def __init__(self, cache_dir: str, ttl_seconds: int = 0) -> None:
        self.cache_dir = Path(cache_dir)
        self.ttl_seconds = ttl_seconds
        self.logger = logging.getLogger(__name__)

        # Create cache directory if it doesn't exist
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def _get_cache_file(self, mode: str) -> Path:
        """Get cache file path for mode."""
        return self.cache_dir / f"{mode}.txt"

    def _is_stale(self, cache_file: Path, db_timestamp: Optional[float]) -> bool:
        mtime = cache_file.stat().st_mtime

        if self.ttl_seconds > 0 and time.time() - mtime > self.ttl_seconds:
            self.logger.debug(f"Cache expired: {cache_file.name}")
            return True

        if db_timestamp is not None and db_timestamp > mtime:
            self.logger.debug(f"Cache older than MPD database: {cache_file.name}")
            return True

        return False

    def get_cached_entries(self, mode: str, db_timestamp: Optional[float] = None) -> Optional[List[str]]:
        """Get cached entries for mode if present and fresh.

        Args:
            mode: Selection mode name
            db_timestamp: Last change of the MPD database (epoch seconds)

        Returns:
            List of cached lines, or None on a miss
        """
        cache_file = self._get_cache_file(mode)

        if not cache_file.exists():
            self.logger.debug(f"Cache miss: {mode}")
            return None

        try:
            if self._is_stale(cache_file, db_timestamp):
                cache_file.unlink()
                return None

            with open(cache_file, 'r', encoding='utf-8') as f:
                entries = [line for line in f.read().splitlines() if line]

        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(f"Unreadable cache file for {mode}: {e}")
            cache_file.unlink(missing_ok=True)
            return None

        if not entries:
            self.logger.debug(f"Cache empty: {mode}")
            return None

        self.logger.debug(f"Cache hit: {mode} ({len(entries)} entries)")
        return entries

    def save_entries(self, mode: str, entries: List[str]) -> None:
        """Write entries for mode, one per line."""
        cache_file = self._get_cache_file(mode)

        try:
            with open(cache_file, 'w', encoding='utf-8') as f:
                f.write('\n'.join(entries))
                if entries:
                    f.write('\n')
            self.logger.debug(f"Cached {len(entries)} entries for: {mode}")
        except OSError as e:
            self.logger.error(f"Failed to cache entries for {mode}: {e}")

    def invalidate(self, mode: str) -> bool:
        """Remove the cache file for a single mode. Returns True if one existed."""
        cache_file = self._get_cache_file(mode)
        if not cache_file.exists():
            return False
        cache_file.unlink()
        self.logger.debug(f"Invalidated cache: {mode}")
        return True

    def clear_cache(self) -> int:
        """Clear all cached files."""
        try:
            cache_files = list(self.cache_dir.glob("*.txt"))
            for cache_file in cache_files:
                cache_file.unlink()
            self.logger.info(f"Cleared {len(cache_files)} cache files")
            return len(cache_files)
        except OSError as e:
            self.logger.error(f"Error clearing cache: {e}")
            return 0

    def get_cache_info(self) -> Dict[str, Any]:
        """Get cache statistics."""
        try:
            cache_files = sorted(self.cache_dir.glob("*.txt"))
            now = time.time()

            total_size = sum(f.stat().st_size for f in cache_files)
            ages = {f.stem: int(now - f.stat().st_mtime) for f in cache_files}

            return {
                'total_files': len(cache_files),
                'total_size_kb': round(total_size / 1024, 2),
                'mode_ages': ages,
                'cache_dir': str(self.cache_dir),
                'ttl_seconds': self.ttl_seconds
            }
        except OSError as e:
            self.logger.error(f"Error getting cache info: {e}")
            return {}
