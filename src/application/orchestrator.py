"""Async orchestrator for the two top-level sync stages."""

from loguru import logger

from application.config import RunOptions
from services.repository import RepositorySyncService
from services.solutions import SolutionSyncService


class SyncOrchestrator:
    """Runs the solution sync and then the repository sync."""

    def __init__(
        self,
        *,
        solution_service: SolutionSyncService,
        repository_service: RepositorySyncService,
    ):
        """
        Initialize orchestrator with dependency injection.

        Args:
            solution_service: Writes accepted solutions to the local tree
            repository_service: Commits and pushes the tree
        """
        self.solution_service = solution_service
        self.repository_service = repository_service

    async def run(self, options: RunOptions) -> None:
        if options.sync_solutions:
            logger.info("Step 1: Syncing solutions from LeetCode")
            await self.solution_service.sync()
        else:
            logger.info("Skipping solution sync")

        if options.sync_repository:
            logger.info("Step 2: Syncing solutions repository")
            await self.repository_service.sync()
        else:
            logger.info("Skipping repository sync")
