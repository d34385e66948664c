"""Service that commits and pushes the solutions tree."""

from loguru import logger

from domain.exceptions import ConfigurationError
from infrastructure.errors import GitCommandError
from infrastructure.interfaces import GitProtocol

DEFAULT_BRANCH = "master"
REMOTE_NAME = "origin"


def commit_message(changed_count: int) -> str:
    return f"chore(solutions): updated {changed_count} submissions"


class RepositorySyncService:
    """Mirrors the local solutions tree to the configured remote repository."""

    def __init__(
        self,
        *,
        git: GitProtocol,
        repo_url: str | None,
        branch: str = DEFAULT_BRANCH,
        remote: str = REMOTE_NAME,
    ):
        """Initialize service with dependencies."""
        self.git = git
        self.repo_url = repo_url
        self.branch = branch
        self.remote = remote

    async def sync(self) -> int:
        """
        Commit every change in the tree and push it.

        Returns:
            Number of changed paths committed (0 when nothing changed)

        Raises:
            ConfigurationError: If no repository URL is configured
            GitCommandError: If any git step other than fetch/reset fails
        """
        if not self.repo_url:
            raise ConfigurationError("REPO_URL env variable not set")

        await self.git.ensure_repository(self.branch)
        await self.git.configure_remote(self.remote, self.repo_url)

        try:
            await self.git.fetch_and_reset(self.remote, self.branch)
        except GitCommandError as e:
            logger.warning(
                f"Could not reset onto {self.remote}/{self.branch}, assuming fresh history: {e}"
            )

        changed_files = await self.git.status()
        changed_count = len(changed_files)

        if changed_count == 0:
            logger.info("No changes detected, skipping commit.")
            return 0

        logger.info(f"Detected {changed_count} changed files")
        await self.git.commit_and_push(commit_message(changed_count), self.remote)
        return changed_count
