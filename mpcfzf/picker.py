"""Interactive selection through fzf."""

import logging
import subprocess
from typing import Dict, List, Optional

from .dataclasses import PickResult

# fzf exit status when the user aborts with Esc or Ctrl-C
ABORT_STATUS = 130

# Keys fzf reports back through --expect, mapped to the action they trigger
KEY_ACTIONS: Dict[str, str] = {
    'ctrl-a': 'artist',
    'ctrl-d': 'directory',
    'ctrl-b': 'artist-album',
    'ctrl-r': 'reload',
    'ctrl-x': 'clear-cache',
    'ctrl-u': 'update',
}

KEY_HELP = 'C-a artists | C-d dirs | C-b albums | C-r reload | C-x clear cache | C-u update db'


class PickerError(Exception):
    """Raised when fzf cannot be run at all."""


class FzfPicker:
    """Runs fzf over a list of lines and reports what the user chose."""

    def __init__(self, command: str = 'fzf') -> None:
        self.command = command
        self.logger = logging.getLogger(__name__)

    def build_command(self, prompt: str, header: Optional[str] = None, multi: bool = True) -> List[str]:
        cmd = [
            self.command,
            '--expect', ','.join(KEY_ACTIONS),
            '--prompt', prompt,
            '--header', header if header is not None else KEY_HELP,
            '--layout', 'reverse',
        ]
        if multi:
            cmd.append('--multi')
        return cmd

    def pick(self, entries: List[str], prompt: str = '> ', header: Optional[str] = None,
             multi: bool = True) -> PickResult:
        """Show entries in fzf and return the chosen lines.

        Args:
            entries: Lines to choose from
            prompt: fzf prompt text
            header: Header line, defaults to the keybinding help
            multi: Allow selecting several lines with Tab

        Returns:
            PickResult with the expect-key (if any) and selected lines

        Raises:
            PickerError: If the fzf executable cannot be started
        """
        cmd = self.build_command(prompt, header, multi)
        self.logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                input='\n'.join(entries),
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            raise PickerError(f"Could not run {self.command}: {e}") from e

        if result.returncode == ABORT_STATUS:
            self.logger.debug("Picker aborted")
            return PickResult(aborted=True)

        if result.returncode not in (0, 1):
            raise PickerError(f"{self.command} exited with status {result.returncode}")

        return self.parse_output(result.stdout)

    @staticmethod
    def parse_output(output: str) -> PickResult:
        """Split fzf --expect output into key and selections."""
        lines = output.splitlines()
        if not lines:
            return PickResult()

        key = lines[0].strip()
        selections = [line for line in lines[1:] if line]
        return PickResult(key=key, selections=selections)
