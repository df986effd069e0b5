"""Submission schemas.

``GradedSubmission`` is what the grader returns (unsaved).  ``SubmissionRead``
is the persisted record; both are immutable once built.
"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class GradingStatus(str, Enum):
    GRADED = "graded"
    PENDING = "pending"  # awaiting manual review (proof / calculation / graph drawing)


class AnswerSubmit(BaseModel):
    """One learner answer: a selected option, or free text for review-only types."""

    question_id: uuid.UUID
    selected_option_id: uuid.UUID | None = None
    response_text: str | None = None


class SubmissionCreate(BaseModel):
    """POST /api/submissions"""

    quiz_id: uuid.UUID
    learner_id: str | None = Field(None, max_length=255)
    answers: list[AnswerSubmit]
    time_taken: float | None = Field(None, ge=0)  # minutes

    @field_validator("answers")
    @classmethod
    def _unique_questions(cls, answers: list[AnswerSubmit]) -> list[AnswerSubmit]:
        seen: set[uuid.UUID] = set()
        for a in answers:
            if a.question_id in seen:
                raise ValueError(f"question {a.question_id} answered more than once")
            seen.add(a.question_id)
        return answers


class AnswerResult(BaseModel):
    question_id: uuid.UUID
    selected_option_id: uuid.UUID | None = None
    response_text: str | None = None
    status: GradingStatus = GradingStatus.GRADED
    is_correct: bool | None = None
    points_earned: float = 0.0

    model_config = {"from_attributes": True, "frozen": True}


class TopicBreakdown(BaseModel):
    """Per‑topic tally within one submission."""

    topic_id: uuid.UUID
    topic_name: str | None = None
    correct: int
    total: int
    performance: float  # correct / total * 100

    model_config = {"from_attributes": True, "frozen": True}


class GradedSubmission(BaseModel):
    quiz_id: uuid.UUID
    learner_id: str | None = None
    answers: list[AnswerResult] = []
    topic_breakdown: list[TopicBreakdown] = []
    total_score: float
    total_points: float
    percentage: float
    pending_review: int = 0
    time_taken: float | None = None
    submitted_at: datetime

    model_config = {"from_attributes": True, "frozen": True}


class SubmissionRead(GradedSubmission):
    id: uuid.UUID
