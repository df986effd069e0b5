"""Quiz schemas."""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from discrete_quiz.schemas.question import QuestionRead
from discrete_quiz.schemas.topic import TopicRead


class QuizDifficulty(str, Enum):
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    MIXED = "Mixed"


class QuizCreate(BaseModel):
    """POST /api/quizzes

    total_points is never accepted from the client; it is summed from the
    referenced questions.  When topic_ids is omitted the topics of the
    questions are used.
    """

    title: str = Field(..., min_length=1, max_length=300)
    question_ids: list[uuid.UUID] = Field(..., min_length=1)
    topic_ids: list[uuid.UUID] | None = None
    difficulty: QuizDifficulty = QuizDifficulty.MIXED
    duration_minutes: int | None = Field(None, gt=0)


class QuizRead(BaseModel):
    """Quiz summary (question references only)."""

    id: uuid.UUID
    title: str
    difficulty: QuizDifficulty
    duration_minutes: int
    total_points: float
    question_ids: list[uuid.UUID] = []
    topic_ids: list[uuid.UUID] = []
    created_at: datetime

    model_config = {"from_attributes": True}


class QuizDetail(QuizRead):
    """Fully resolved quiz — questions and topics populated."""

    questions: list[QuestionRead] = []
    topics: list[TopicRead] = []
