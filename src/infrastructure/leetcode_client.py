"""Client for the LeetCode GraphQL API."""

import json
from typing import Any

from loguru import logger
from pydantic import BaseModel, ValidationError

from domain.models import QuestionInfo, SubmissionDetail, SubmissionPage
from infrastructure.errors import ApiResponseError, GraphQLError, ResponseShapeError
from infrastructure.interfaces import HTTPClientProtocol, LeetCodeAPIProtocol
from infrastructure.queries import (
    QUESTION_QUERY,
    SUBMISSION_DETAIL_QUERY,
    SUBMISSION_LIST_QUERY,
)
from infrastructure.schemas import (
    QuestionSchema,
    SubmissionDetailsSchema,
    SubmissionListSchema,
)

GRAPHQL_URL = "https://leetcode.com/graphql"
REFERER = "https://leetcode.com/"


class LeetCodeClient(LeetCodeAPIProtocol):
    """Authenticated client for the LeetCode GraphQL endpoint."""

    def __init__(
        self,
        http_client: HTTPClientProtocol,
        *,
        session_token: str,
        csrf_token: str,
        graphql_url: str = GRAPHQL_URL,
    ):
        """
        Initialize client.

        Args:
            http_client: HTTP client used for POST requests
            session_token: Value of the LEETCODE_SESSION cookie
            csrf_token: Value of the csrftoken cookie
            graphql_url: GraphQL endpoint
        """
        self.http_client = http_client
        self.graphql_url = graphql_url
        self.headers = {
            "Content-Type": "application/json",
            "X-CSRFToken": csrf_token,
            "Referer": REFERER,
            "Cookie": f"LEETCODE_SESSION={session_token}; csrftoken={csrf_token}",
        }

    async def query(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """
        Run a GraphQL query and return its data object.

        Raises:
            GraphQLError: If the response carries a non-empty errors field
            ApiResponseError: If the response is not a GraphQL envelope
        """
        response = await self.http_client.post_json(
            self.graphql_url,
            {"query": query, "variables": variables},
            headers=self.headers,
        )
        body = response.body

        if not isinstance(body, dict):
            raise ApiResponseError(
                f"Unexpected response body: {body!r}", status_code=response.status_code
            )

        errors = body.get("errors")
        if errors:
            logger.error(json.dumps(errors, indent=2))
            raise GraphQLError(errors)

        data = body.get("data")
        if not isinstance(data, dict):
            raise ApiResponseError(
                "Response has no data object", status_code=response.status_code
            )
        return data

    async def fetch_submission_page(
        self, offset: int, limit: int, last_key: str | None = None
    ) -> SubmissionPage:
        """Fetch one page of the submission list."""
        data = await self.query(
            SUBMISSION_LIST_QUERY,
            {"offset": offset, "limit": limit, "lastKey": last_key},
        )
        schema = self._validate(
            SubmissionListSchema, data.get("submissionList"), "submissionList"
        )
        return schema.to_domain()

    async def fetch_submission_detail(self, submission_id: int) -> SubmissionDetail | None:
        """Fetch source code for a submission, or None when the API returns nothing."""
        data = await self.query(SUBMISSION_DETAIL_QUERY, {"submissionId": submission_id})
        payload = data.get("submissionDetails")
        if payload is None:
            return None

        schema = self._validate(SubmissionDetailsSchema, payload, "submissionDetails")
        return schema.to_domain()

    async def fetch_question_info(self, title_slug: str) -> QuestionInfo:
        """Fetch frontend id and lowercased difficulty for a problem."""
        data = await self.query(QUESTION_QUERY, {"titleSlug": title_slug})
        schema = self._validate(QuestionSchema, data.get("question"), "question")
        return schema.to_domain()

    @staticmethod
    def _validate(schema: type[BaseModel], payload: Any, field: str) -> Any:
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            raise ResponseShapeError(f"Unexpected shape for {field}: {e}") from e
