"""Command-line interface for querying connections between two stops."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

import aiohttp
from pydantic import ValidationError

from transport_cli.adapters.config import AppConfig
from transport_cli.adapters.config.app_config import MAX_API_LIMIT, MIN_API_LIMIT
from transport_cli.adapters.opendata_api import OpendataConnectionRepository
from transport_cli.adapters.terminal import TerminalDisplayAdapter
from transport_cli.adapters.terminal.formatters import SummaryFormatter, TimelineFormatter
from transport_cli.application.services import ConnectionQueryService
from transport_cli.domain.errors import TransportCliError, UsageError
from transport_cli.domain.models import ConnectionQuery

logger = logging.getLogger(__name__)


def _limit_type(value: str) -> int:
    """Parse and range-check the --limit option."""
    try:
        limit = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid limit: '{value}'") from None
    if not MIN_API_LIMIT <= limit <= MAX_API_LIMIT:
        raise argparse.ArgumentTypeError(
            f"limit must be between {MIN_API_LIMIT} and {MAX_API_LIMIT}"
        )
    return limit


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="transport",
        description="Show public transport connections between two stops",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Timeline of the next connections
  transport Bern "Zürich HB"

  # One line per connection
  transport --simple Lausanne Genève

Environment:
  TRANSPORT_API_BASE_URL, TRANSPORT_API_TIMEOUT, TRANSPORT_API_LIMIT,
  TRANSPORT_SHOW_BANNER, TRANSPORT_LOG_LEVEL, TRANSPORT_LOG_REQUESTS

API: https://transport.opendata.ch/docs.html (no auth)
        """,
    )
    parser.add_argument("origin", metavar="FROM", help="Departure stop name")
    parser.add_argument("destination", metavar="TO", help="Arrival stop name")
    parser.add_argument(
        "--simple",
        action="store_true",
        help="Show one summary line per connection instead of a timeline",
    )
    parser.add_argument(
        "--limit",
        type=_limit_type,
        default=None,
        help=f"Number of connections to request ({MIN_API_LIMIT}-{MAX_API_LIMIT})",
    )
    parser.add_argument("--no-banner", action="store_true", help="Don't print the banner")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _build_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration from the environment and apply command line overrides."""
    config = AppConfig()
    overrides: dict[str, object] = {}
    if args.limit is not None:
        overrides["api_limit"] = args.limit
    if args.no_banner:
        overrides["show_banner"] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return config.model_copy(update=overrides)


def _configure_logging(level: str) -> None:
    """Configure logging to stderr so it never mixes with the connection output."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def run(
    query: ConnectionQuery,
    config: AppConfig,
    simple: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Query connections and write them to the output stream.

    Raises:
        TransportCliError: If the query fails.
    """
    formatter = SummaryFormatter() if simple else TimelineFormatter()
    display = TerminalDisplayAdapter(formatter, stream=stream)

    if config.show_banner:
        display.display_banner()

    async with aiohttp.ClientSession() as session:
        repository = OpendataConnectionRepository(session=session, config=config)
        service = ConnectionQueryService(repository)
        connections = await service.find_connections(query)

    display.display_connections(connections)


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit code.
    """
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    try:
        config = _build_config(args)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return UsageError.exit_code

    _configure_logging(config.log_level)

    query = ConnectionQuery(
        origin=args.origin,
        destination=args.destination,
        limit=config.api_limit,
    )

    try:
        asyncio.run(run(query, config, simple=args.simple))
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1
    except TransportCliError as e:
        logger.debug(f"Query failed: {type(e).__name__}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
