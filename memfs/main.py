#!/usr/bin/env python3
"""
memfs - An in-memory hierarchical file system

This is the main entry point for memfs.

Usage:
    memfs [-h] [--config PATH] [--script PATH] [--log-level LEVEL]

Without ``--script`` an interactive shell is started; with it, the
script's commands are run one per line and the shell exits.

Author: YSNRFD
Version: 1.0.0
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, List

from memfs import __version__
from memfs.core.config_loader import ConfigLoader
from memfs.exceptions import ConfigException
from memfs.filesystem.vfs import VirtualFileSystem
from memfs.logger import Logger, LogLevel, get_logger
from memfs.shell.shell import Shell


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the memfs command.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="memfs",
        description="In-memory hierarchical file system with an interactive shell.",
    )
    p.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help="JSON configuration file.",
    )
    p.add_argument(
        "--script",
        metavar="PATH",
        default=None,
        help="Run the commands in PATH, one per line, instead of the interactive shell.",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        metavar="LEVEL",
        default=None,
        help="Override the configured log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for memfs.

    Startup sequence:
    1. Parse arguments
    2. Load configuration
    3. Initialize logging
    4. Create the file system and shell
    5. Run the script or the interactive shell

    Returns:
        Process exit code
    """
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        # argparse exits after --help, --version and usage errors
        return e.code if isinstance(e.code, int) else 2

    loader = ConfigLoader()
    try:
        if args.config:
            loader.load(args.config)
        level = LogLevel.from_name(args.log_level or loader.config.logging.level)
    except (ConfigException, ValueError) as e:
        print(f"memfs: {e}", file=sys.stderr)
        return 1

    config = loader.config
    Logger.initialize(
        level=level,
        log_file=config.logging.log_file or None,
        use_colors=config.logging.use_colors,
        console_output=config.logging.console_output,
    )
    logger = get_logger('main')

    shell = Shell(VirtualFileSystem(config.filesystem), config.shell)

    if args.script:
        try:
            script = Path(args.script).read_text(encoding='utf-8')
        except OSError as e:
            logger.exception("Cannot read script", e, context={'path': args.script})
            print(f"memfs: cannot read script: {e}", file=sys.stderr)
            return 1
        return shell.run_script(script)

    try:
        shell.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted")

    return 0


if __name__ == '__main__':
    sys.exit(main())
