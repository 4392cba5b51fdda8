"""Pytest configuration and fixtures for mpc-fzf tests."""

import subprocess
import pytest
from unittest.mock import Mock
from mpcfzf.dataclasses import PickerConfig
from mpcfzf.cache_manager import ListCacheManager
from mpcfzf.mpc import MpcClient


@pytest.fixture
def temp_cache_dir(tmp_path):
    """Create temporary cache directory for tests."""
    return tmp_path / "test_cache"


@pytest.fixture
def cache_manager(temp_cache_dir):
    """Create cache manager instance for testing."""
    return ListCacheManager(str(temp_cache_dir), ttl_seconds=3600)


@pytest.fixture
def picker_config(temp_cache_dir):
    """Create picker configuration pointing at a temporary cache."""
    return PickerConfig(
        cache_dir=str(temp_cache_dir),
        cache_ttl=3600,
        mpd_db_file=None,
        default_mode='artist',
    )


@pytest.fixture
def mock_client():
    """Create mock mpc client with an empty library."""
    client = Mock(spec=MpcClient)
    client.db_updated.return_value = None
    client.list_artists.return_value = []
    client.list_albums.return_value = []
    client.list_years.return_value = []
    client.list_directories.return_value = []
    client.add_artist.return_value = True
    client.add_album.return_value = True
    client.add_path.return_value = True
    client.clear_queue.return_value = True
    client.play.return_value = True
    client.update_library.return_value = True
    return client


@pytest.fixture
def completed():
    """Factory for fake subprocess results."""
    def _completed(stdout='', returncode=0, stderr=''):
        return subprocess.CompletedProcess(args=[], returncode=returncode,
                                           stdout=stdout, stderr=stderr)
    return _completed
