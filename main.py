# main.py

"""Entry point for shopsearch (TUI, headless CLI or API server)."""

import argparse
import asyncio
import logging
import sys

from shopsearch.config.logging_config import setup_logging
from shopsearch.config.settings import Settings

logger = logging.getLogger("shopsearch.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="shopsearch",
        description="Product search over the Zenserp shopping API.",
        epilog="ZENSERP_API_KEY must be set in the environment or in .env.",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search query. Omit to launch the interactive TUI.",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        default=False,
        help="Open the TUI directly on the results for QUERY.",
    )
    parser.add_argument(
        "--filter",
        default=None,
        dest="filter_text",
        help="Only show results whose name contains this text.",
    )
    parser.add_argument(
        "-d",
        "--detail",
        default=None,
        metavar="PRODUCT_ID",
        help="Show details for a single product id.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help="Talk to a running shopsearch API instead of Zenserp directly.",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        default=False,
        help="Run the HTTP API (search-endpoint, detail-endpoint).",
    )
    parser.add_argument(
        "--host",
        default=Settings.API_HOST,
        help=f"Bind address for --serve (default: {Settings.API_HOST}).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Settings.API_PORT,
        help=f"Port for --serve (default: {Settings.API_PORT}).",
    )
    return parser


def _run_tui(args: argparse.Namespace) -> None:
    """Launch the interactive Textual TUI."""
    from shopsearch.services.backend import build_backend
    from shopsearch.ui.app import ShopSearchApp

    try:
        app = ShopSearchApp(build_backend(args.api_url), args.query)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("shopsearch TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Run a headless search and exit."""
    from shopsearch.cli.runner import cli_search

    exit_code = asyncio.run(
        cli_search(
            query=args.query,
            filter_text=args.filter_text,
            output_format=args.output_format,
            api_url=args.api_url,
        )
    )
    sys.exit(exit_code)


def _run_detail(args: argparse.Namespace) -> None:
    """Print one product's details and exit."""
    from shopsearch.cli.runner import cli_detail

    exit_code = asyncio.run(
        cli_detail(
            product_id=args.detail,
            output_format=args.output_format,
            api_url=args.api_url,
        )
    )
    sys.exit(exit_code)


def _run_server(args: argparse.Namespace) -> None:
    """Serve the HTTP API."""
    from shopsearch.cli.runner import serve

    sys.exit(serve(args.host, args.port))


def main() -> None:
    """Route to the API server, a detail lookup, a search, or the TUI."""
    args = _build_parser().parse_args()

    log_file = setup_logging(include_server=args.serve)
    logger.info("shopsearch starting, log file: %s", log_file)

    if args.serve:
        _run_server(args)
    elif args.detail:
        _run_detail(args)
    elif args.query is None or args.interactive:
        _run_tui(args)
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
