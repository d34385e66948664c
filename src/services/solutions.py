"""Service that mirrors recent accepted solutions into the local tree."""

from pathlib import Path

from loguru import logger

from domain.submissions import latest_accepted
from infrastructure.interfaces import LeetCodeAPIProtocol

from .fetcher import SubmissionFetcher
from .writer import SolutionWriter


class SolutionSyncService:
    """Fetches, deduplicates, enriches and writes accepted submissions."""

    def __init__(
        self,
        *,
        api_client: LeetCodeAPIProtocol,
        fetcher: SubmissionFetcher,
        writer: SolutionWriter,
    ):
        """Initialize service with dependencies."""
        self.api_client = api_client
        self.fetcher = fetcher
        self.writer = writer

    async def sync(self) -> int:
        """
        Write the latest accepted solution of every recently solved problem.

        Returns:
            Number of problems written

        Raises:
            ApiError: If any API call fails; files written so far stay on disk
        """
        self.writer.prepare()

        submissions = await self.fetcher.fetch_all()
        latest = latest_accepted(submissions)
        logger.debug(
            f"{len(latest)} accepted problem(s) among {len(submissions)} submission(s)"
        )

        written: dict[Path, str] = {}
        problem_count = 0

        for submission in latest:
            detail = await self.api_client.fetch_submission_detail(submission.id)
            if detail is None:
                continue
            problem_count += 1

            question = await self.api_client.fetch_question_info(submission.title_slug)
            if not question.has_known_difficulty:
                logger.warning(
                    f"Unknown difficulty '{question.difficulty}' for {submission.title_slug}, "
                    f"writing to {question.difficulty}/"
                )

            path = self.writer.write(detail.code, detail.lang, question.qid, question.difficulty)

            previous_slug = written.get(path)
            if previous_slug is not None and previous_slug != submission.title_slug:
                logger.warning(
                    f"{submission.title_slug} overwrote {previous_slug} at {path}"
                )
            written[path] = submission.title_slug

        logger.info(f"Wrote {problem_count} submissions to solutions/")
        return problem_count
