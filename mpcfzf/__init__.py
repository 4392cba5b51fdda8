"""Browse an MPD library with fzf and queue the selection."""

__version__ = "0.3.0"

from .dataclasses import AlbumEntry, PickerConfig, PickResult, MODES
from .core import MpcFzf

# Internal components (for advanced usage)
from .cache_manager import ListCacheManager
from .mpc import MpcClient
from .picker import FzfPicker, PickerError

# Line formatting utilities
from .text_utils import (
    sort_unique,
    extract_year,
    format_album_entry,
    parse_album_entry,
)

__all__ = [
    # Version
    '__version__',

    # Core API
    'MpcFzf',
    'PickerConfig',
    'PickResult',
    'AlbumEntry',
    'MODES',

    # Line formatting
    'sort_unique',
    'extract_year',
    'format_album_entry',
    'parse_album_entry',

    # Internal components (for advanced usage)
    'ListCacheManager',
    'MpcClient',
    'FzfPicker',
    'PickerError',
]
