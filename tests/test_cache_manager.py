"""Tests for list cache manager functionality."""

import os
import time
from mpcfzf.cache_manager import ListCacheManager


def _age(path, seconds):
    """Push a file's mtime into the past."""
    past = time.time() - seconds
    os.utime(path, (past, past))


class TestListCacheManager:
    """Test suite for ListCacheManager."""

    def test_cache_creation(self, tmp_path):
        """Test cache manager creates nested directories."""
        cache_dir = tmp_path / "xdg" / "mpc-fzf"
        cache_manager = ListCacheManager(str(cache_dir), ttl_seconds=60)
        assert cache_dir.exists()
        assert cache_manager.cache_dir == cache_dir
        assert cache_manager.ttl_seconds == 60

    def test_save_and_retrieve(self, cache_manager):
        entries = ["Alpha", "beta", "Gamma"]
        cache_manager.save_entries("artist", entries)

        assert cache_manager.get_cached_entries("artist") == entries

    def test_file_is_plain_text_per_mode(self, cache_manager):
        cache_manager.save_entries("artist-album", ["A - B [2000]", "C - D"])

        cache_file = cache_manager.cache_dir / "artist-album.txt"
        assert cache_file.read_text(encoding='utf-8') == "A - B [2000]\nC - D\n"

    def test_cache_miss(self, cache_manager):
        assert cache_manager.get_cached_entries("directory") is None

    def test_expired_entries_are_refreshed(self, cache_manager):
        """Entries older than the TTL are a miss and the file is removed."""
        cache_manager.save_entries("artist", ["Alpha"])
        cache_file = cache_manager.cache_dir / "artist.txt"
        _age(cache_file, 7200)

        assert cache_manager.get_cached_entries("artist") is None
        assert not cache_file.exists()

    def test_zero_ttl_never_expires(self, temp_cache_dir):
        cache_manager = ListCacheManager(str(temp_cache_dir), ttl_seconds=0)
        cache_manager.save_entries("artist", ["Alpha"])
        _age(cache_manager.cache_dir / "artist.txt", 10 * 365 * 86400)

        assert cache_manager.get_cached_entries("artist") == ["Alpha"]

    def test_newer_database_invalidates(self, cache_manager):
        cache_manager.save_entries("artist", ["Alpha"])
        cache_file = cache_manager.cache_dir / "artist.txt"
        _age(cache_file, 60)

        assert cache_manager.get_cached_entries("artist", db_timestamp=time.time()) is None
        assert not cache_file.exists()

    def test_older_database_keeps_cache(self, cache_manager):
        cache_manager.save_entries("artist", ["Alpha"])

        db_timestamp = time.time() - 600
        assert cache_manager.get_cached_entries("artist", db_timestamp=db_timestamp) == ["Alpha"]

    def test_empty_cache_file_is_a_miss(self, cache_manager):
        (cache_manager.cache_dir / "artist.txt").write_text("", encoding='utf-8')
        assert cache_manager.get_cached_entries("artist") is None

    def test_undecodable_cache_file_is_removed(self, cache_manager):
        cache_file = cache_manager.cache_dir / "artist.txt"
        cache_file.write_bytes(b"\xff\xfe\xfa")

        assert cache_manager.get_cached_entries("artist") is None
        assert not cache_file.exists()

    def test_invalidate_single_mode(self, cache_manager):
        cache_manager.save_entries("artist", ["Alpha"])
        cache_manager.save_entries("directory", ["music/a"])

        assert cache_manager.invalidate("artist") is True
        assert cache_manager.invalidate("artist") is False
        assert cache_manager.get_cached_entries("directory") == ["music/a"]

    def test_clear_cache(self, cache_manager):
        """Test clearing all cached files."""
        for mode in ("artist", "directory", "artist-album"):
            cache_manager.save_entries(mode, ["x"])
        unrelated = cache_manager.cache_dir / "notes.json"
        unrelated.write_text("{}", encoding='utf-8')

        assert cache_manager.clear_cache() == 3
        assert len(list(cache_manager.cache_dir.glob("*.txt"))) == 0
        assert unrelated.exists()

    def test_cache_info(self, cache_manager):
        cache_manager.save_entries("artist", ["Alpha", "beta"])

        info = cache_manager.get_cache_info()
        assert info['total_files'] == 1
        assert info['cache_dir'] == str(cache_manager.cache_dir)
        assert info['ttl_seconds'] == 3600
        assert set(info['mode_ages']) == {"artist"}
