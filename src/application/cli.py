"""Command-line entry point for leetcode-sync."""

import asyncio
import sys
from collections.abc import Sequence

from dotenv import load_dotenv
from loguru import logger

from application.config import RunOptions, Settings
from application.orchestrator import SyncOrchestrator
from domain.exceptions import ConfigurationError
from infrastructure.http_client import AsyncHTTPClient
from services import create_repository_sync_service, create_solution_sync_service


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


async def run(settings: Settings, options: RunOptions) -> None:
    """Build services from settings and run the requested stages."""
    async with AsyncHTTPClient() as http_client:
        orchestrator = SyncOrchestrator(
            solution_service=create_solution_sync_service(settings, http_client),
            repository_service=create_repository_sync_service(settings),
        )
        await orchestrator.run(options)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    # Load environment variables from .env file
    load_dotenv()

    args = sys.argv[1:] if argv is None else argv
    options = RunOptions.from_argv(args)

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        configure_logging("INFO")
        logger.error(str(e))
        sys.exit(1)

    configure_logging(settings.log_level)

    try:
        asyncio.run(run(settings, options))
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
