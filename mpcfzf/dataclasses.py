import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

# Selection modes in the order they are offered
MODES = ('artist', 'directory', 'artist-album')

DEFAULT_CACHE_TTL = 86400  # One day

# Where MPD keeps its database on common setups
DEFAULT_DB_CANDIDATES = (
    '~/.local/share/mpd/database',
    '~/.mpd/database',
    '/var/lib/mpd/tag_cache',
)


def default_cache_dir(env: Optional[Dict[str, str]] = None) -> str:
    """Resolve the cache directory from XDG_CACHE_HOME or HOME."""
    env = os.environ if env is None else env
    base = env.get('XDG_CACHE_HOME')
    if not base:
        home = env.get('HOME') or str(Path.home())
        base = os.path.join(home, '.cache')
    return os.path.join(base, 'mpc-fzf')


def find_db_file(env: Optional[Dict[str, str]] = None) -> Optional[str]:
    """Return MPD_DB_FILE if set, else the first existing default database path."""
    env = os.environ if env is None else env
    if env.get('MPD_DB_FILE'):
        return env['MPD_DB_FILE']

    home = env.get('HOME') or str(Path.home())
    for candidate in DEFAULT_DB_CANDIDATES:
        if candidate.startswith('~/'):
            path = Path(home) / candidate[2:]
        else:
            path = Path(candidate)
        if path.exists():
            return str(path)
    return None


@dataclass(repr=True)
class PickerConfig:
    """Configuration for the mpc/fzf picker."""
    # Cache settings
    cache_dir: str = field(default_factory=default_cache_dir)
    cache_ttl: int = DEFAULT_CACHE_TTL  # Seconds, 0 = only invalidate on database change
    cache_enabled: bool = True

    # MPD database file whose mtime invalidates the cache (None = ask mpc stats)
    mpd_db_file: Optional[str] = None

    # MPD connection, passed through to mpc
    mpd_host: Optional[str] = None
    mpd_port: Optional[int] = None

    # External executables
    mpc_command: str = 'mpc'
    fzf_command: str = 'fzf'

    default_mode: str = 'artist'

    @classmethod
    def from_env(cls, env: Optional[Dict[str, str]] = None) -> 'PickerConfig':
        """Create PickerConfig from environment variables."""
        env = os.environ if env is None else env

        ttl = env.get('MPC_FZF_CACHE_TTL')
        port = env.get('MPD_PORT')

        return cls(
            cache_dir=default_cache_dir(env),
            cache_ttl=int(ttl) if ttl else DEFAULT_CACHE_TTL,
            mpd_db_file=find_db_file(env),
            mpd_host=env.get('MPD_HOST') or None,
            mpd_port=int(port) if port else None,
            mpc_command=env.get('MPC_FZF_MPC', 'mpc'),
            fzf_command=env.get('MPC_FZF_FZF', 'fzf'),
            default_mode=env.get('MPC_FZF_DEFAULT_MODE', 'artist'),
        )

    @property
    def is_mode_valid(self) -> bool:
        """Check if the default mode names a known selection mode."""
        return self.default_mode in MODES


@dataclass(repr=True)
class AlbumEntry:
    """An artist/album/year triple as shown in artist-album mode."""
    artist: str
    album: str
    year: str = ''  # Empty when MPD has no date tag


@dataclass(repr=True)
class PickResult:
    """Outcome of one fzf session."""
    key: str = ''  # Expect-key pressed, empty for Enter
    selections: List[str] = field(default_factory=list)
    aborted: bool = False
