"""Domain models package."""

from .question import QuestionInfo
from .submission import Submission, SubmissionDetail, SubmissionPage

__all__ = [
    "QuestionInfo",
    "Submission",
    "SubmissionDetail",
    "SubmissionPage",
]
