"""Runtime configuration for leetcode-sync."""

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from domain.exceptions import ConfigurationError
from infrastructure.leetcode_client import GRAPHQL_URL

DEFAULT_SOLUTIONS_DIR = Path("..") / "solutions"
MISSING_SECRETS_MESSAGE = "Set all env variables, see README for all required"

SKIP_SOLUTION_SYNC_FLAG = "--no-lc-sync"
SKIP_REPOSITORY_SYNC_FLAG = "--no-gh-sync"


@dataclass(frozen=True)
class Settings:
    """Values read once from the environment at startup."""

    leetcode_session: str
    csrf_token: str
    repo_url: str | None = None
    solutions_dir: Path = DEFAULT_SOLUTIONS_DIR
    graphql_url: str = GRAPHQL_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            ConfigurationError: If LEETCODE_SESSION or CSRF_TOKEN is missing, or LOG_LEVEL
                is not a known loguru level
        """
        env = os.environ if environ is None else environ

        session = env.get("LEETCODE_SESSION")
        csrf_token = env.get("CSRF_TOKEN")
        if not session or not csrf_token:
            raise ConfigurationError(MISSING_SECRETS_MESSAGE)

        log_level = env.get("LOG_LEVEL", "INFO").upper()
        try:
            logger.level(log_level)
        except ValueError as e:
            raise ConfigurationError(f"Unknown LOG_LEVEL: {log_level}") from e

        solutions_dir = env.get("SOLUTIONS_DIR")
        return cls(
            leetcode_session=session,
            csrf_token=csrf_token,
            repo_url=env.get("REPO_URL") or None,
            solutions_dir=Path(solutions_dir) if solutions_dir else DEFAULT_SOLUTIONS_DIR,
            log_level=log_level,
        )


@dataclass(frozen=True)
class RunOptions:
    """Which top-level stages to run."""

    sync_solutions: bool = True
    sync_repository: bool = True

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "RunOptions":
        return cls(
            sync_solutions=SKIP_SOLUTION_SYNC_FLAG not in argv,
            sync_repository=SKIP_REPOSITORY_SYNC_FLAG not in argv,
        )
