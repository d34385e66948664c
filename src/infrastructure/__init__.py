"""Adapters for the LeetCode API, HTTP and git."""

from .errors import (
    ApiError,
    ApiResponseError,
    GitCommandError,
    GraphQLError,
    ResponseShapeError,
)
from .git_client import GitCLI
from .interfaces import GitProtocol, HTTPClientProtocol, JSONResponse, LeetCodeAPIProtocol
from .leetcode_client import LeetCodeClient

__all__ = [
    "ApiError",
    "ApiResponseError",
    "GitCLI",
    "GitCommandError",
    "GitProtocol",
    "GraphQLError",
    "HTTPClientProtocol",
    "JSONResponse",
    "LeetCodeAPIProtocol",
    "LeetCodeClient",
    "ResponseShapeError",
]
