#!/usr/bin/env python3
"""
Command Sync CLI Entry Point

Loads configuration, then runs a single sync pass of the local command
definitions against Discord's application-command registry.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from command_sync import __version__, __package_name__
from command_sync.errors import ConfigurationError, SyncError


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


async def run_sync(args) -> int:
    """Build the syncer from config and run one pass. Returns the exit code."""
    from command_sync.config import ConfigManager
    from command_sync.sync import CommandSyncer
    from command_sync.utils import Logger

    config = ConfigManager.get_instance().load()

    # CLI flags win over environment
    if args.commands_dir:
        config.commands_path = Path(args.commands_dir)
    if args.guild:
        config.scoped_guilds = list(args.guild)
    if args.log_level:
        config.log_level = args.log_level

    logger = Logger(name=__package_name__, level=config.log_level)
    syncer = CommandSyncer.from_config(config, logger)

    try:
        report = await syncer.sync()
    finally:
        await syncer.reconciler.client.aclose()

    return 0 if report.ok else 1


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="command-sync",
        description="Sync local command definitions to Discord's application-command registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  command-sync                          Sync global commands from ./commands
  command-sync --commands-dir bot/cmds  Sync from another directory
  command-sync --guild 123 --guild 456  Sync to two guilds instead of globally

Environment:
  DISCORD_TOKEN            Bot token (required)
  DISCORD_APPLICATION_ID   Application id (fetched from the API if unset)
  COMMANDS_PATH            Commands directory (default: commands)
  SCOPED_GUILDS            Comma-separated guild ids (default: global)
"""
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--commands-dir",
        help="Directory containing command modules (default: $COMMANDS_PATH)"
    )
    parser.add_argument(
        "--guild", "-g",
        action="append",
        help="Guild id to sync to; repeat for several (default: global)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: $LOG_LEVEL)"
    )

    args = parser.parse_args()

    if args.version:
        print_version()
        sys.exit(0)

    try:
        exit_code = asyncio.run(run_sync(args))
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        sys.exit(2)
    except SyncError as e:
        print(f"Sync failed: {e.message}", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
