"""Async HTTP client built on curl_cffi."""

from typing import Any

from curl_cffi.requests import AsyncSession
from curl_cffi.requests.exceptions import RequestException
from loguru import logger

from infrastructure.errors import ApiResponseError
from infrastructure.interfaces import JSONResponse


class AsyncHTTPClient:
    """Thin wrapper around a curl_cffi session for JSON POST requests."""

    def __init__(
        self,
        timeout: float | None = None,
        impersonate: str = "chrome",
        session: AsyncSession | None = None,
    ):
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds (None keeps the session default)
            impersonate: Browser fingerprint used by curl_cffi
            session: Existing session to use instead of creating one
        """
        if session is None:
            session_kwargs: dict[str, Any] = {"impersonate": impersonate}
            if timeout is not None:
                session_kwargs["timeout"] = timeout
            session = AsyncSession(**session_kwargs)
        self._session = session

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """
        POST a JSON payload and return the status code with the decoded body.

        Raises:
            ApiResponseError: If the request fails or the body is not JSON
        """
        logger.debug(f"POST {url}")
        try:
            response = await self._session.post(url, json=payload, headers=headers)
        except RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise ApiResponseError(f"Request to {url} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Non-JSON response from {url} (HTTP {response.status_code})")
            raise ApiResponseError(
                f"Non-JSON response from {url}", status_code=response.status_code
            ) from e

        return JSONResponse(status_code=response.status_code, body=body)

    async def close(self) -> None:
        await self._session.close()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
