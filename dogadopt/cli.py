"""
Command line access to dog and rescue listings.

Usage:
    dogadopt dogs
    dogadopt rescues --json
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional
from loguru import logger

from .config import settings
from .exceptions import FetchError
from .hooks.dog_listings import DogListingFetcher
from .hooks.rescue_listings import RescueListingFetcher
from .utils.api_clients import SupabaseClient
from .utils.helpers import format_dog_summary, format_rescue_summary


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level.upper())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dogadopt", description="dogadopt listings")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL, or DEBUG when DEBUG=true)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--url", default=None, help="Supabase project URL (overrides SUPABASE_URL)")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("dogs", help="List dogs, newest first")
    subparsers.add_parser("rescues", help="List rescues alphabetically")
    return parser


async def run(args: argparse.Namespace) -> int:
    """Fetch and print the requested listing. Returns the exit code."""
    client = SupabaseClient(url=args.url)

    try:
        if args.command == "dogs":
            results = await DogListingFetcher(client).fetch()
            lines = [format_dog_summary(dog) for dog in results]
            title = f"=== {len(results)} dogs looking for a home ==="
        else:
            results = await RescueListingFetcher(client).fetch()
            lines = [format_rescue_summary(rescue) for rescue in results]
            title = f"=== {len(results)} rescues ==="
    except FetchError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([item.model_dump(mode="json") for item in results], indent=2))
        return 0

    print(f"\n{title}\n")
    for i, line in enumerate(lines, 1):
        print(f"{i}. {line}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or settings.effective_log_level())
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
