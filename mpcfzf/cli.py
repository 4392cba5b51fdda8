#!/usr/bin/env python3
"""Command-line interface for browsing MPD with fzf.

Lists artists, directories or "Artist - Album [Year]" lines from the MPD
library, lets the user pick some in fzf and adds them to the queue.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from mpcfzf import __version__
from mpcfzf.core import MpcFzf
from mpcfzf.dataclasses import MODES, PickerConfig, PickResult
from mpcfzf.picker import KEY_ACTIONS, FzfPicker, PickerError

MODE_FLAGS = {
    'artist': '--artist',
    'directory': '--directory',
    'artist-album': '--artist-album',
}


def setup_logging(verbose: bool = False):
    """Configure logging for CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(message)s'
    )


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='mpc-fzf',
        description='Pick artists, directories or albums from MPD with fzf and queue them',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -a          pick artists and append them to the queue
  %(prog)s -b -n       pick albums, replace the queue and start playing
  %(prog)s -d --no-cache
  %(prog)s -c          drop all cached lists first

Keys inside fzf:
  ctrl-a/ctrl-d/ctrl-b  switch to artist/directory/artist-album mode
  ctrl-r                reload the current mode
  ctrl-x                clear all cached lists
  ctrl-u                update the MPD library and clear all cached lists

Environment Variables:
  XDG_CACHE_HOME        Cache root (default: $HOME/.cache)
  MPC_FZF_CACHE_TTL     Cache lifetime in seconds (default: 86400)
  MPC_FZF_DEFAULT_MODE  Mode used when no mode flag is given (default: artist)
  MPD_DB_FILE           MPD database whose changes invalidate the cache
  MPD_HOST, MPD_PORT    MPD connection passed to mpc
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        '-a', '--artist',
        dest='mode',
        action='store_const',
        const='artist',
        help='Browse artists'
    )
    modes.add_argument(
        '-d', '--directory',
        dest='mode',
        action='store_const',
        const='directory',
        help='Browse directories'
    )
    modes.add_argument(
        '-b', '--artist-album',
        dest='mode',
        action='store_const',
        const='artist-album',
        help='Browse "Artist - Album [Year]" entries'
    )

    parser.add_argument(
        '-c', '--clear',
        action='store_true',
        help='Clear all cached lists before running'
    )

    parser.add_argument(
        '-n', '--new',
        action='store_true',
        help='Replace the queue with the selection and start playing'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging and list every queued item'
    )

    parser.add_argument(
        '--no-cache',
        action='store_true',
        help='Query mpc directly, neither reading nor writing the cache'
    )

    parser.add_argument(
        '--cache-info',
        action='store_true',
        help='Show cache statistics and exit'
    )

    return parser.parse_args(argv)


def create_config_from_args(args) -> PickerConfig:
    """Create PickerConfig from environment variables and command-line arguments."""
    config = PickerConfig.from_env()
    if args.no_cache:
        config.cache_enabled = False
    return config


def resolve_mode(args, config: PickerConfig) -> str:
    """Pick the mode from flags, falling back to the configured default."""
    if args.mode:
        return args.mode
    if not config.is_mode_valid:
        raise ValueError(
            f"Invalid mode: {config.default_mode!r} (expected one of {', '.join(MODES)})"
        )
    return config.default_mode


def build_reexec_argv(args, mode: str, clear: bool = False) -> List[str]:
    """Arguments to restart this program in another mode."""
    argv = [sys.executable, '-m', 'mpcfzf', MODE_FLAGS[mode]]
    if clear:
        argv.append('--clear')
    if args.new:
        argv.append('--new')
    if args.verbose:
        argv.append('--verbose')
    if args.no_cache:
        argv.append('--no-cache')
    return argv


def reexec(args, mode: str, clear: bool = False):
    """Replace the current process with a fresh run in mode."""
    argv = build_reexec_argv(args, mode, clear)
    logging.getLogger(__name__).debug(f"Re-executing: {' '.join(argv)}")
    sys.stdout.flush()
    os.execvp(argv[0], argv)


def handle_key(app: MpcFzf, args, mode: str, key: str) -> int:
    """Carry out the action bound to an fzf expect-key."""
    action = KEY_ACTIONS.get(key)

    if action is None:
        print(f"Error: unknown key: {key}", file=sys.stderr)
        return 1

    if action in MODES:
        reexec(args, action)
    elif action == 'reload':
        app.invalidate(mode)
        reexec(args, mode)
    elif action == 'clear-cache':
        reexec(args, mode, clear=True)
    elif action == 'update':
        print("Updating MPD library...")
        app.update_library()
        reexec(args, mode)

    # Only reached when execvp is stubbed out
    return 0


def print_summary(added: List[str], result: PickResult, replace: bool, verbose: bool):
    """Report what was queued."""
    if verbose:
        for line in added:
            print(f"  + {line}")

    print(f"Added {len(added)} item(s) to queue")

    failed = len(result.selections) - len(added)
    if failed > 0:
        print(f"  Failed: {failed}")
    if replace and added:
        print("Queue replaced, playback started")


def run(args, config: PickerConfig) -> int:
    """Run one pick-and-queue pass."""
    app = MpcFzf(config)

    if args.cache_info:
        cache_info = app.get_cache_info()
        if cache_info.get('cache_enabled'):
            print(f"Cache directory: {cache_info.get('cache_dir', 'N/A')}")
            print(f"Total cached files: {cache_info.get('total_files', 0)}")
            print(f"Total cache size: {cache_info.get('total_size_kb', 0):.2f} KB")
            print(f"Cache TTL: {cache_info.get('ttl_seconds', 0)} seconds")
            for cached_mode, age in cache_info.get('mode_ages', {}).items():
                print(f"  {cached_mode}: {age}s old")
        else:
            print("Cache is disabled")
        return 0

    try:
        mode = resolve_mode(args, config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.clear:
        cleared_count = app.clear_cache()
        logging.getLogger(__name__).info(f"Cleared {cleared_count} cache file(s)")

    entries = app.load_entries(mode, use_cache=not args.no_cache)
    if not entries:
        print(f"Error: no {mode} entries found in the MPD library", file=sys.stderr)
        return 1

    picker = FzfPicker(config.fzf_command)
    result = picker.pick(entries, prompt=f"{mode}> ")

    if result.aborted:
        return 130

    if result.key:
        return handle_key(app, args, mode, result.key)

    if not result.selections:
        print("Nothing selected")
        return 0

    added = app.add_selections(mode, result.selections, replace=args.new)
    print_summary(added, result, args.new, args.verbose)
    return 0 if added else 1


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = create_config_from_args(args)
        return run(args, config)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130

    except PickerError as e:
        logger.error(f"Picker failed: {e}")
        return 1

    except Exception as e:
        logger.error(f"Fatal error: {e}")
        if args.verbose:
            raise
        return 1


if __name__ == '__main__':
    sys.exit(main())
