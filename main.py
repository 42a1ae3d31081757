# main.py

"""Entry point for the storefront (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Product listing with an in-memory cart.",
        epilog="Run without arguments to launch the interactive TUI.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_products",
        help="Print the product list and exit.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format for --list (default: json).",
    )
    parser.add_argument(
        "--health",
        action="store_true",
        default=False,
        help="Run a connectivity health check on the content API.",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import StorefrontApp

    try:
        app = StorefrontApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def _run_list(args: argparse.Namespace) -> None:
    """Print products headlessly and exit."""
    from src.cli.runner import cli_list

    exit_code = asyncio.run(cli_list(args.output_format))
    sys.exit(exit_code)


def _run_health_check() -> None:
    """Run the content API health check."""
    from src.cli.runner import run_health_check

    exit_code = asyncio.run(run_health_check())
    sys.exit(exit_code)


def main() -> None:
    """Route to the TUI (no flags) or a headless command."""
    parser = _build_parser()
    args = parser.parse_args()

    headless = args.list_products or args.health
    log_file = setup_logging(console=headless)
    logger.info("storefront starting - log file: %s", log_file)

    if args.health:
        _run_health_check()
    elif args.list_products:
        _run_list(args)
    else:
        _run_tui()


if __name__ == "__main__":
    main()
