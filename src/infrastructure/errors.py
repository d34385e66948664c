"""Exceptions raised by infrastructure adapters."""

import json
from typing import Any

from domain.exceptions import SyncError


class ApiError(SyncError):
    """Base error for LeetCode API failures."""

    pass


class GraphQLError(ApiError):
    """The GraphQL endpoint answered with a non-empty errors payload."""

    def __init__(self, errors: list[dict[str, Any]]):
        self.errors = errors
        super().__init__(f"GraphQL error: {json.dumps(errors)}")


class ApiResponseError(ApiError):
    """Response body was not a usable GraphQL envelope."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message)


class ResponseShapeError(ApiError):
    """Response data did not match the expected schema."""

    pass


class GitCommandError(SyncError):
    """A git command exited with a non-zero status."""

    def __init__(self, args: tuple[str, ...], returncode: int, stderr: str = ""):
        self.command = args
        self.returncode = returncode
        self.stderr = stderr
        message = f"git {' '.join(args)} failed with exit code {returncode}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
