#!/usr/bin/env python3
"""whspr CLI - Download, list, and manage whisper.cpp models.

Usage:
    python -m whspr list              # List catalog models
    python -m whspr download MODEL    # Download (or verify) a model
    python -m whspr path MODEL        # Print the local path of a model
    python -m whspr remove MODEL      # Delete a cached model
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import Config
from .exceptions import WhsprError
from .models.catalog import MODELS
from .models.store import ModelAcquirer
from .utils.logging import setup_logging, verbosity_to_level

logger = logging.getLogger(__name__)


def get_version():
    """Get package version."""
    from whspr import __version__
    return __version__


def cmd_list(args, acquirer: ModelAcquirer) -> int:
    """List catalog models and whether they are installed."""
    if args.json_output:
        models = []
        for info in MODELS:
            data = info.to_dict()
            data["installed"] = acquirer.is_cached(info.name)
            models.append(data)
        print(json.dumps({"models": models}, indent=2))
    else:
        print("Available Models:")
        print("-" * 40)
        for info in MODELS:
            status = "[installed]" if acquirer.is_cached(info.name) else ""
            size = f"{info.size_mb:.0f}MB"
            print(f"  {info.name:<12} {size:>8} {status}")
        print()
        print(f"Store location: {acquirer.cache_dir}")
    return 0


def cmd_download(args, acquirer: ModelAcquirer) -> int:
    """Download a model."""
    path = acquirer.fetch(args.model)
    if args.json_output:
        print(json.dumps({"status": "ready", "model": args.model, "path": str(path)}))
    else:
        print(str(path))
    return 0


def cmd_path(args, acquirer: ModelAcquirer) -> int:
    """Print the deterministic path of a model."""
    print(str(acquirer.model_path(args.model)))
    return 0


def cmd_remove(args, acquirer: ModelAcquirer) -> int:
    """Delete a model from the cache."""
    if acquirer.remove(args.model):
        print(f"Deleted: {args.model}")
    else:
        print(f"Model not installed: {args.model}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="whspr",
        description="Manage whisper.cpp models",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  list              List catalog models and installed state
  download MODEL    Download a model into the local cache
  path MODEL        Print the filesystem path of a model
  remove MODEL      Delete a model from the cache

Examples:
  python -m whspr list
  python -m whspr download tiny
  python -m whspr -v download large-v3
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More log output (repeatable)")
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Less log output (repeatable)")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("list", help="List catalog models")

    download_parser = subparsers.add_parser("download", help="Download a model")
    download_parser.add_argument("model", help="Model name to download")

    path_parser = subparsers.add_parser("path", help="Get model path")
    path_parser.add_argument("model", help="Model name")

    remove_parser = subparsers.add_parser("remove", help="Delete a model")
    remove_parser.add_argument("model", help="Model name to delete")

    return parser


def main(argv: Optional[List[str]] = None, acquirer: Optional[ModelAcquirer] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = Config.from_env()
    except WhsprError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    base_level = logging.getLevelName(config.log_level)
    if not isinstance(base_level, int):
        base_level = logging.INFO
    setup_logging(verbosity_to_level(base_level, args.verbose, args.quiet))

    if acquirer is None:
        acquirer = ModelAcquirer.from_config(config)

    commands = {
        "list": cmd_list,
        "download": cmd_download,
        "path": cmd_path,
        "remove": cmd_remove,
    }

    try:
        return commands[args.command](args, acquirer)
    except WhsprError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
