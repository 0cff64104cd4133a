"""
ScreenSound - Entry Point

Run with: python -m screensound
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from screensound import __version__
from screensound.cli import CatalogMenu
from screensound.config import Settings, load_settings
from screensound.core.catalog import CatalogService
from screensound.core.catalog_db import CatalogDb
from screensound.enrichment import AudioDbClient


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from third-party libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="screensound",
        description="ScreenSound - a console catalog of artists and their songs",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="TOML settings file overriding the packaged defaults",
    )

    parser.add_argument(
        "--db",
        type=str,
        default=None,
        help="SQLite database file (overrides database.path)",
    )

    parser.add_argument(
        "--no-enrichment",
        action="store_true",
        help="Disable the external artist lookup",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Load settings and apply command line overrides."""
    settings = load_settings(args.config)
    if args.db:
        settings.database.path = args.db
    if args.no_enrichment:
        settings.enrichment.enabled = False
    return settings


async def run_app(settings: Settings) -> None:
    """Open the catalog DB and drive the console menu until exit."""
    enrichment = (
        AudioDbClient.from_settings(settings.enrichment) if settings.enrichment.enabled else None
    )
    async with CatalogDb(settings.database.path) as db:
        service = CatalogService(db=db, enrichment=enrichment)
        await CatalogMenu(service).run()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    logger = logging.getLogger(__name__)

    try:
        settings = build_settings(args)
        logger.info("Using catalog DB %s", settings.database.path)
        asyncio.run(run_app(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
