"""Thin wrapper around the mpc command-line client."""

import logging
import posixpath
import subprocess
from datetime import datetime
from typing import List, Optional

from .text_utils import extract_year

# mpc prints timestamps with ctime()
DB_UPDATED_FORMAT = '%a %b %d %H:%M:%S %Y'


class MpcClient:
    """Runs mpc queries and queue commands.

    A failing mpc call never raises: its output is simply empty, which callers
    treat the same as "no data".
    """

    def __init__(self, command: str = 'mpc', host: Optional[str] = None,
                 port: Optional[int] = None) -> None:
        self.command = command
        self.host = host
        self.port = port
        self.logger = logging.getLogger(__name__)

    def _build_command(self, *args: str) -> List[str]:
        cmd = [self.command]
        if self.host:
            cmd.extend(['--host', self.host])
        if self.port:
            cmd.extend(['--port', str(self.port)])
        cmd.extend(args)
        return cmd

    def _execute(self, *args: str) -> Optional[str]:
        """Run mpc and return stdout, or None if it failed."""
        cmd = self._build_command(*args)
        self.logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            self.logger.error(f"Could not run {self.command}: {e}")
            return None

        if result.returncode != 0:
            self.logger.warning(
                f"{' '.join(cmd)} exited with {result.returncode}: {result.stderr.strip()}"
            )
            return None

        return result.stdout

    def run(self, *args: str) -> str:
        """Run mpc with args and return stdout, or '' on failure."""
        return self._execute(*args) or ''

    def _lines(self, *args: str) -> List[str]:
        return [line for line in self.run(*args).splitlines() if line.strip()]

    def _ok(self, *args: str) -> bool:
        return self._execute(*args) is not None

    # Library queries

    def list_artists(self) -> List[str]:
        return self._lines('list', 'artist')

    def list_albums(self, artist: str) -> List[str]:
        return self._lines('list', 'album', 'artist', artist)

    def list_dates(self, artist: str, album: str) -> List[str]:
        return self._lines('list', 'date', 'artist', artist, 'album', album)

    def list_years(self, artist: str, album: str) -> List[str]:
        """Distinct four-digit years tagged on an album, ascending."""
        years = {extract_year(date) for date in self.list_dates(artist, album)}
        return sorted(year for year in years if year)

    def list_directories(self) -> List[str]:
        """Every directory that directly holds at least one song."""
        directories = set()
        for path in self._lines('listall'):
            parent = posixpath.dirname(path)
            if parent:
                directories.add(parent)
        return list(directories)

    def db_updated(self) -> Optional[float]:
        """Return the "DB Updated" time from mpc stats as epoch seconds."""
        for line in self._lines('stats'):
            key, _, value = line.partition(':')
            if key.strip() != 'DB Updated':
                continue
            try:
                return datetime.strptime(value.strip(), DB_UPDATED_FORMAT).timestamp()
            except ValueError:
                self.logger.debug(f"Unparseable DB Updated value: {value.strip()}")
                return None
        return None

    # Queue commands

    def add_artist(self, artist: str) -> bool:
        return self._ok('findadd', 'artist', artist)

    def add_album(self, artist: str, album: str) -> bool:
        return self._ok('findadd', 'artist', artist, 'album', album)

    def add_path(self, path: str) -> bool:
        return self._ok('add', path)

    def clear_queue(self) -> bool:
        return self._ok('clear')

    def play(self) -> bool:
        return self._ok('play')

    def update_library(self) -> bool:
        """Rescan the music directory and block until MPD is done."""
        return self._ok('--wait', 'update')
