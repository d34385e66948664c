from typing import TYPE_CHECKING

from services.fetcher import SubmissionFetcher
from services.repository import RepositorySyncService
from services.solutions import SolutionSyncService
from services.writer import SolutionWriter

if TYPE_CHECKING:
    from application.config import Settings
    from infrastructure.interfaces import HTTPClientProtocol


def create_solution_sync_service(
    settings: "Settings", http_client: "HTTPClientProtocol"
) -> SolutionSyncService:
    """Factory function to create solution sync service with all dependencies."""
    from infrastructure.leetcode_client import LeetCodeClient

    api_client = LeetCodeClient(
        http_client,
        session_token=settings.leetcode_session,
        csrf_token=settings.csrf_token,
        graphql_url=settings.graphql_url,
    )

    return SolutionSyncService(
        api_client=api_client,
        fetcher=SubmissionFetcher(api_client=api_client),
        writer=SolutionWriter(settings.solutions_dir),
    )


def create_repository_sync_service(settings: "Settings") -> RepositorySyncService:
    """Factory function to create repository sync service with all dependencies."""
    from infrastructure.git_client import GitCLI

    return RepositorySyncService(
        git=GitCLI(settings.solutions_dir),
        repo_url=settings.repo_url,
    )


__all__ = [
    "RepositorySyncService",
    "SolutionSyncService",
    "SolutionWriter",
    "SubmissionFetcher",
    "create_repository_sync_service",
    "create_solution_sync_service",
]
