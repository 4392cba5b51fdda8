"""Tests for configuration defaults and environment handling."""

from mpcfzf.dataclasses import DEFAULT_CACHE_TTL, PickerConfig, default_cache_dir, find_db_file


class TestPickerConfig:
    """Test suite for PickerConfig dataclass."""

    def test_cache_dir_from_xdg(self):
        env = {'XDG_CACHE_HOME': '/tmp/xdg', 'HOME': '/home/listener'}
        assert default_cache_dir(env) == '/tmp/xdg/mpc-fzf'

    def test_cache_dir_from_home(self):
        env = {'HOME': '/home/listener'}
        assert default_cache_dir(env) == '/home/listener/.cache/mpc-fzf'

    def test_from_env_defaults(self, tmp_path):
        config = PickerConfig.from_env({'HOME': str(tmp_path), 'MPD_DB_FILE': ''})

        assert config.cache_dir == str(tmp_path / '.cache' / 'mpc-fzf')
        assert config.cache_ttl == DEFAULT_CACHE_TTL
        assert config.mpd_host is None
        assert config.mpd_port is None
        assert config.mpc_command == 'mpc'
        assert config.fzf_command == 'fzf'
        assert config.default_mode == 'artist'

    def test_from_env_overrides(self, tmp_path):
        env = {
            'HOME': str(tmp_path),
            'MPC_FZF_CACHE_TTL': '120',
            'MPC_FZF_DEFAULT_MODE': 'artist-album',
            'MPD_DB_FILE': '/srv/mpd/database',
            'MPD_HOST': 'music.local',
            'MPD_PORT': '6601',
        }
        config = PickerConfig.from_env(env)

        assert config.cache_ttl == 120
        assert config.default_mode == 'artist-album'
        assert config.mpd_db_file == '/srv/mpd/database'
        assert config.mpd_host == 'music.local'
        assert config.mpd_port == 6601

    def test_find_db_file_in_home(self, tmp_path):
        db_file = tmp_path / '.local' / 'share' / 'mpd' / 'database'
        db_file.parent.mkdir(parents=True)
        db_file.write_bytes(b'')

        assert find_db_file({'HOME': str(tmp_path)}) == str(db_file)

    def test_is_mode_valid(self):
        assert PickerConfig(default_mode='directory').is_mode_valid is True
        assert PickerConfig(default_mode='genre').is_mode_valid is False
