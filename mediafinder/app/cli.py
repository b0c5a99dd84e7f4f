#!/usr/bin/env python3
"""
mediafinder CLI

Search TMDB for movies, TV shows and people, pick one result and print its details.
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from .graph import MediaSearchGraph
from ..core.config import load_settings
from ..core.errors import ConfigurationError
from ..core.logger import SearchLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search TMDB and show details about one result")
    parser.add_argument(
        "query",
        nargs="?",
        help="Search term (prompted for when omitted)"
    )
    parser.add_argument(
        "--config", "-c",
        help="JSON configuration file path"
    )
    parser.add_argument(
        "--lang",
        help="Language of the returned metadata (default: en-US)"
    )
    parser.add_argument(
        "--first",
        action="store_true",
        help="Select the first result without prompting"
    )
    parser.add_argument(
        "--log-dir",
        default="./logs",
        help="Directory for log files (default: ./logs)"
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Do not write log files"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    verbosity.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet mode - only the selected result is printed"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config, language=args.lang)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    console = Console()
    logger = SearchLogger(
        log_dir=None if args.no_log_file else args.log_dir,
        verbose=args.verbose,
        quiet=args.quiet
    )
    graph = MediaSearchGraph(settings, logger=logger, console=console)

    try:
        graph.run({
            "query": args.query,
            "first": args.first
        })
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        logger.log_error(e)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)
    finally:
        graph.tmdb.close()
        log_file = logger.finalize()
        if args.verbose and log_file:
            print(f"Log file: {log_file}", file=sys.stderr)


if __name__ == "__main__":
    main()
