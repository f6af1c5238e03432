#!/usr/bin/env python3
"""
CLI for minigrep

Usage:
  minigrep QUERY FILE_PATH                # Print lines of FILE_PATH containing QUERY
  IGNORE_CASE=1 minigrep QUERY FILE_PATH  # Same, ignoring case

Positional arguments only; anything after FILE_PATH is ignored.
"""
import logging
import os
import sys
from collections.abc import Sequence
from typing import Optional

from .container import Container
from .core import Config, ConfigError


def get_log_level() -> str:
    """Get log level from env or use fallback"""
    level = os.environ.get("MINIGREP_LOG_LEVEL", "WARNING").upper()
    # getLevelName maps known names to ints, anything else to "Level <name>"
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


def configure_logging() -> None:
    # stderr only; stdout carries matching lines
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )


def silence_stdout() -> None:
    """Point stdout at devnull so the flush at exit cannot fail again"""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        # stdout has no file descriptor (e.g. replaced by a StringIO)
        pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a search from the process arguments, return the exit code"""
    configure_logging()

    if argv is None:
        argv = sys.argv

    try:
        config = Config.build(argv)
    except ConfigError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    try:
        Container().run.execute(config)
    except BrokenPipeError:
        # Downstream reader closed early (e.g. `| head -1`); not an error
        silence_stdout()
        return 0
    except (OSError, UnicodeDecodeError) as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
