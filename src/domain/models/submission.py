"""Value objects for LeetCode submissions."""

from dataclasses import dataclass, field

ACCEPTED_STATUS = "Accepted"


@dataclass(frozen=True)
class Submission:
    """A single entry from the user's submission list."""

    id: int
    title: str
    title_slug: str
    status_display: str
    lang: str
    timestamp: int

    @property
    def is_accepted(self) -> bool:
        return self.status_display == ACCEPTED_STATUS

    def __str__(self) -> str:
        """String representation."""
        return f"{self.title_slug}@{self.timestamp}"


@dataclass(frozen=True)
class SubmissionPage:
    """One page of the submission list."""

    submissions: list[Submission] = field(default_factory=list)
    has_next: bool = False
    last_key: str | None = None


@dataclass(frozen=True)
class SubmissionDetail:
    """Source code of a submission and the language it was written in."""

    code: str
    lang: str
