"""Protocol interfaces for infrastructure adapters."""

from dataclasses import dataclass
from typing import Any, Protocol

from domain.models import QuestionInfo, SubmissionDetail, SubmissionPage


@dataclass(frozen=True)
class JSONResponse:
    """Decoded JSON body together with its HTTP status."""

    status_code: int
    body: Any


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """POST JSON and return the status code with the decoded body."""
        ...


class LeetCodeAPIProtocol(Protocol):
    """Protocol for the LeetCode GraphQL API client."""

    async def fetch_submission_page(
        self, offset: int, limit: int, last_key: str | None = None
    ) -> SubmissionPage:
        """Fetch one page of the submission list."""
        ...

    async def fetch_submission_detail(self, submission_id: int) -> SubmissionDetail | None:
        """Fetch source code for a submission."""
        ...

    async def fetch_question_info(self, title_slug: str) -> QuestionInfo:
        """Fetch frontend id and difficulty for a problem."""
        ...


class GitProtocol(Protocol):
    """Protocol for the version-control capability used by repository sync."""

    async def ensure_repository(self, branch: str) -> None:
        """Initialize a working tree if needed and force the branch name."""
        ...

    async def configure_remote(self, name: str, url: str) -> None:
        """Add the remote, or repoint it if it already exists."""
        ...

    async def fetch_and_reset(self, remote: str, branch: str) -> None:
        """Fetch the remote and move local history onto its branch."""
        ...

    async def status(self) -> list[str]:
        """Return one porcelain status line per changed path."""
        ...

    async def commit_and_push(self, message: str, remote: str) -> None:
        """Stage everything, commit and push the current branch."""
        ...
