"""Paginated collection of recent submissions."""

import time
from collections.abc import Callable

from loguru import logger

from domain.models import Submission
from infrastructure.interfaces import LeetCodeAPIProtocol

PAGE_SIZE = 10
RETENTION_WINDOW_SECONDS = 30 * 24 * 60 * 60


class SubmissionFetcher:
    """Pages through the submission list until the retention cutoff."""

    def __init__(
        self,
        *,
        api_client: LeetCodeAPIProtocol,
        page_size: int = PAGE_SIZE,
        window_seconds: int = RETENTION_WINDOW_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize fetcher with dependencies."""
        self.api_client = api_client
        self.page_size = page_size
        self.window_seconds = window_seconds
        self.clock = clock

    async def fetch_all(self) -> list[Submission]:
        """
        Collect submissions newer than the cutoff, in the order the API returns them.

        Stops at the first submission older than the cutoff; later pages are never
        requested. Submissions are expected newest first.
        """
        offset = 0
        last_key: str | None = None
        cutoff = int(self.clock()) - self.window_seconds
        collected: list[Submission] = []
        previous_timestamp: int | None = None
        order_warning_logged = False

        while True:
            page = await self.api_client.fetch_submission_page(offset, self.page_size, last_key)
            logger.info(f"Fetching submissions {offset}..{offset + self.page_size}")

            for submission in page.submissions:
                if submission.timestamp < cutoff:
                    logger.debug(f"Reached cutoff at {submission}, collected {len(collected)}")
                    return collected

                if (
                    previous_timestamp is not None
                    and submission.timestamp > previous_timestamp
                    and not order_warning_logged
                ):
                    logger.warning(
                        f"Submission {submission} is newer than the one before it; "
                        "older accepted submissions past the cutoff may be missed"
                    )
                    order_warning_logged = True

                previous_timestamp = submission.timestamp
                collected.append(submission)

            if not page.has_next:
                break

            last_key = page.last_key
            offset += self.page_size

        return collected
