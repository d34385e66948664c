"""Pure operations over submission lists."""

from collections.abc import Iterable

from domain.models import Submission


def latest_accepted(submissions: Iterable[Submission]) -> list[Submission]:
    """
    Reduce submissions to the latest accepted one per problem.

    Only accepted submissions are considered. For each title slug the entry with
    the greatest timestamp is kept; of equal timestamps the first seen wins.
    Result order is the order in which each slug first appears.
    """
    latest: dict[str, Submission] = {}
    for submission in submissions:
        if not submission.is_accepted:
            continue

        previous = latest.get(submission.title_slug)
        if previous is None or submission.timestamp > previous.timestamp:
            latest[submission.title_slug] = submission

    return list(latest.values())
