"""Unit tests for paginated submission fetching."""

from unittest.mock import AsyncMock

import pytest

from domain.models import Submission, SubmissionPage
from services.fetcher import RETENTION_WINDOW_SECONDS, SubmissionFetcher

NOW = 1_700_000_000
CUTOFF = NOW - RETENTION_WINDOW_SECONDS


def make_submission(submission_id, timestamp, status="Accepted"):
    return Submission(
        id=submission_id,
        title=f"Problem {submission_id}",
        title_slug=f"problem-{submission_id}",
        status_display=status,
        lang="cpp",
        timestamp=timestamp,
    )


def make_fetcher(pages, page_size=2):
    api_client = AsyncMock()
    api_client.fetch_submission_page.side_effect = pages
    fetcher = SubmissionFetcher(api_client=api_client, page_size=page_size, clock=lambda: NOW)
    return fetcher, api_client


@pytest.mark.asyncio
async def test_follows_pagination_until_has_next_is_false():
    """Test that offset and last key advance between pages."""
    pages = [
        SubmissionPage(
            submissions=[make_submission(1, NOW - 10), make_submission(2, NOW - 20)],
            has_next=True,
            last_key="key-1",
        ),
        SubmissionPage(
            submissions=[make_submission(3, NOW - 30)],
            has_next=False,
            last_key=None,
        ),
    ]
    fetcher, api_client = make_fetcher(pages)

    result = await fetcher.fetch_all()

    assert [s.id for s in result] == [1, 2, 3]
    assert [call.args for call in api_client.fetch_submission_page.await_args_list] == [
        (0, 2, None),
        (2, 2, "key-1"),
    ]


@pytest.mark.asyncio
async def test_stops_at_first_submission_older_than_cutoff():
    """Test that nothing after the first old submission is collected or fetched."""
    pages = [
        SubmissionPage(
            submissions=[
                make_submission(1, NOW - 5, status="Wrong Answer"),
                make_submission(2, CUTOFF - 1),
                make_submission(3, NOW - 1),
            ],
            has_next=True,
            last_key="key-1",
        ),
        SubmissionPage(submissions=[make_submission(4, NOW)], has_next=False),
    ]
    fetcher, api_client = make_fetcher(pages, page_size=3)

    result = await fetcher.fetch_all()

    assert [s.id for s in result] == [1]
    assert api_client.fetch_submission_page.await_count == 1


@pytest.mark.asyncio
async def test_submission_exactly_at_cutoff_is_kept():
    pages = [SubmissionPage(submissions=[make_submission(1, CUTOFF)], has_next=False)]
    fetcher, _ = make_fetcher(pages)

    result = await fetcher.fetch_all()

    assert [s.id for s in result] == [1]


@pytest.mark.asyncio
async def test_out_of_order_timestamps_are_still_collected():
    """Test that an ascending pair does not change what is collected."""
    pages = [
        SubmissionPage(
            submissions=[make_submission(1, NOW - 100), make_submission(2, NOW - 10)],
            has_next=False,
        )
    ]
    fetcher, _ = make_fetcher(pages)

    result = await fetcher.fetch_all()

    assert [s.id for s in result] == [1, 2]


@pytest.mark.asyncio
async def test_api_failure_propagates():
    api_client = AsyncMock()
    api_client.fetch_submission_page.side_effect = RuntimeError("boom")
    fetcher = SubmissionFetcher(api_client=api_client, clock=lambda: NOW)

    with pytest.raises(RuntimeError):
        await fetcher.fetch_all()


@pytest.mark.asyncio
async def test_out_of_order_timestamps_warn_once(log_records):
    """Test that broken newest-first ordering is reported a single time per run."""
    pages = [
        SubmissionPage(
            submissions=[
                make_submission(1, NOW - 100),
                make_submission(2, NOW - 10),
                make_submission(3, NOW - 50),
                make_submission(4, NOW - 5),
            ],
            has_next=False,
        )
    ]
    fetcher, _ = make_fetcher(pages)

    await fetcher.fetch_all()

    warnings = [message for level, message in log_records if level == "WARNING"]
    assert len(warnings) == 1
    assert "problem-2" in warnings[0]


@pytest.mark.asyncio
async def test_descending_timestamps_do_not_warn(log_records):
    pages = [
        SubmissionPage(
            submissions=[make_submission(1, NOW - 10), make_submission(2, NOW - 20)],
            has_next=False,
        )
    ]
    fetcher, _ = make_fetcher(pages)

    await fetcher.fetch_all()

    assert [m for level, m in log_records if level == "WARNING"] == []
