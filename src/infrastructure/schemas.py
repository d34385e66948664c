"""Pydantic schemas for LeetCode GraphQL payloads."""

from pydantic import BaseModel, Field

from domain.models import QuestionInfo, Submission, SubmissionDetail, SubmissionPage


class SubmissionSchema(BaseModel):
    """Entry of the submissionList.submissions array."""

    id: int
    title: str
    title_slug: str = Field(alias="titleSlug")
    status_display: str = Field(alias="statusDisplay")
    lang: str
    timestamp: int

    class Config:
        populate_by_name = True

    def to_domain(self) -> Submission:
        return Submission(
            id=self.id,
            title=self.title,
            title_slug=self.title_slug,
            status_display=self.status_display,
            lang=self.lang,
            timestamp=self.timestamp,
        )


class SubmissionListSchema(BaseModel):
    """Payload of the submissionList field."""

    has_next: bool = Field(alias="hasNext")
    last_key: str | None = Field(default=None, alias="lastKey")
    submissions: list[SubmissionSchema] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    def to_domain(self) -> SubmissionPage:
        return SubmissionPage(
            submissions=[s.to_domain() for s in self.submissions],
            has_next=self.has_next,
            last_key=self.last_key,
        )


class LanguageSchema(BaseModel):
    """Language descriptor attached to submission details."""

    name: str


class SubmissionDetailsSchema(BaseModel):
    """Payload of the submissionDetails field."""

    code: str
    lang: LanguageSchema

    def to_domain(self) -> SubmissionDetail:
        return SubmissionDetail(code=self.code, lang=self.lang.name)


class QuestionSchema(BaseModel):
    """Payload of the question field."""

    question_frontend_id: str = Field(alias="questionFrontendId")
    difficulty: str

    class Config:
        populate_by_name = True

    def to_domain(self) -> QuestionInfo:
        return QuestionInfo(
            qid=self.question_frontend_id,
            difficulty=self.difficulty.lower(),
        )
