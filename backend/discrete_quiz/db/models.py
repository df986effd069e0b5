"""SQLAlchemy ORM models for the discrete-math quiz service.

Tables
------
- topics              – discrete-math topics (category + difficulty tier)
- questions           – gradable items, each owned by one topic
- question_options    – ordered answer options of a question
- quizzes             – ordered question collections with a point budget
- quiz_questions      – quiz ↔ question join with position
- quiz_topics         – quiz ↔ topic many‑to‑many
- submissions         – one graded learner attempt (never updated)
- submission_answers  – per‑question results of a submission
- submission_topics   – per‑topic breakdown of a submission
"""

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from discrete_quiz.db.session import Base


# ── helpers ───────────────────────────────────────────────────────────────────


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _uuid() -> uuid.UUID:
    return uuid.uuid4()


# ── Enums (stored as VARCHAR via SQLAlchemy Enum) ─────────────────────────────


class TopicCategoryEnum(str, enum.Enum):
    SET_THEORY = "Set Theory"
    LOGIC = "Logic"
    RELATIONS = "Relations"
    FUNCTIONS = "Functions"
    GRAPH_THEORY = "Graph Theory"
    TREES = "Trees"
    BOOLEAN_ALGEBRA = "Boolean Algebra"
    COMBINATORICS = "Combinatorics"
    PROBABILITY = "Probability"


class DifficultyEnum(str, enum.Enum):
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class QuizDifficultyEnum(str, enum.Enum):
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    MIXED = "Mixed"


class QuestionTypeEnum(str, enum.Enum):
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    GRAPH_DRAWING = "graph_drawing"
    PROOF = "proof"
    CALCULATION = "calculation"


class GradingStatusEnum(str, enum.Enum):
    GRADED = "graded"
    PENDING = "pending"


# ── Topics ────────────────────────────────────────────────────────────────────


class Topic(Base):
    __tablename__ = "topics"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String(200), index=True)
    category: Mapped[TopicCategoryEnum] = mapped_column(
        Enum(TopicCategoryEnum, name="topic_category_enum")
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    difficulty: Mapped[DifficultyEnum] = mapped_column(
        Enum(DifficultyEnum, name="difficulty_enum"), default=DifficultyEnum.BASIC
    )

    questions: Mapped[list["Question"]] = relationship(back_populates="topic")


# ── Questions ─────────────────────────────────────────────────────────────────


class Question(Base):
    __tablename__ = "questions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=_uuid)
    topic_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("topics.id"), index=True
    )
    question_type: Mapped[QuestionTypeEnum] = mapped_column(
        Enum(QuestionTypeEnum, name="question_type_enum"),
        default=QuestionTypeEnum.MULTIPLE_CHOICE,
    )
    difficulty: Mapped[DifficultyEnum] = mapped_column(
        Enum(DifficultyEnum, name="difficulty_enum", create_constraint=False),
        default=DifficultyEnum.BASIC,
    )
    text: Mapped[str] = mapped_column(Text)
    images: Mapped[list | None] = mapped_column(JSON, nullable=True)
    solution: Mapped[dict | None] = mapped_column(JSON, nullable=True)  # {steps, final_answer}
    graph_data: Mapped[dict | None] = mapped_column(JSON, nullable=True)  # {vertices, edges, is_directed}
    hints: Mapped[list | None] = mapped_column(JSON, nullable=True)
    explanation: Mapped[str | None] = mapped_column(Text, nullable=True)
    points: Mapped[float] = mapped_column(Float, default=1.0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow
    )

    topic: Mapped["Topic"] = relationship(back_populates="questions")
    options: Mapped[list["QuestionOption"]] = relationship(
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="QuestionOption.position",
    )

    @property
    def topic_name(self) -> str | None:
        return self.topic.name if self.topic else None


class QuestionOption(Base):
    __tablename__ = "question_options"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=_uuid)
    question_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("questions.id"), index=True
    )
    text: Mapped[str] = mapped_column(Text)
    is_correct: Mapped[bool] = mapped_column(Boolean, default=False)
    explanation: Mapped[str | None] = mapped_column(Text, nullable=True)
    position: Mapped[int] = mapped_column(Integer, default=0)

    question: Mapped["Question"] = relationship(back_populates="options")


# ── Quizzes ───────────────────────────────────────────────────────────────────


quiz_topics = Table(
    "quiz_topics",
    Base.metadata,
    Column("quiz_id", Uuid, ForeignKey("quizzes.id"), primary_key=True),
    Column("topic_id", Uuid, ForeignKey("topics.id"), primary_key=True),
)


class Quiz(Base):
    __tablename__ = "quizzes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=_uuid)
    title: Mapped[str] = mapped_column(String(300))
    difficulty: Mapped[QuizDifficultyEnum] = mapped_column(
        Enum(QuizDifficultyEnum, name="quiz_difficulty_enum"),
        default=QuizDifficultyEnum.MIXED,
    )
    duration_minutes: Mapped[int] = mapped_column(Integer, default=30)
    total_points: Mapped[float] = mapped_column(Float, default=0.0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow
    )

    topics: Mapped[list["Topic"]] = relationship(secondary=quiz_topics)
    quiz_questions: Mapped[list["QuizQuestion"]] = relationship(
        back_populates="quiz",
        cascade="all, delete-orphan",
        order_by="QuizQuestion.position",
    )

    @property
    def questions(self) -> list["Question"]:
        """Questions in quiz order."""
        return [qq.question for qq in self.quiz_questions]

    @property
    def question_ids(self) -> list[uuid.UUID]:
        return [qq.question_id for qq in self.quiz_questions]

    @property
    def topic_ids(self) -> list[uuid.UUID]:
        return [t.id for t in self.topics]


class QuizQuestion(Base):
    """Join table between Quiz and Question with ordering."""

    __tablename__ = "quiz_questions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=_uuid)
    quiz_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("quizzes.id"))
    question_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("questions.id"))
    position: Mapped[int] = mapped_column(Integer, default=0)

    quiz: Mapped["Quiz"] = relationship(back_populates="quiz_questions")
    question: Mapped["Question"] = relationship("Question")


# ── Submissions ───────────────────────────────────────────────────────────────


class Submission(Base):
    __tablename__ = "submissions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=_uuid)
    quiz_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("quizzes.id"), index=True
    )
    learner_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True
    )
    total_score: Mapped[float] = mapped_column(Float, default=0.0)
    total_points: Mapped[float] = mapped_column(Float, default=0.0)
    percentage: Mapped[float] = mapped_column(Float, default=0.0)
    pending_review: Mapped[int] = mapped_column(Integer, default=0)
    time_taken: Mapped[float | None] = mapped_column(Float, nullable=True)  # minutes
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow
    )

    quiz: Mapped["Quiz"] = relationship("Quiz")
    answers: Mapped[list["SubmissionAnswer"]] = relationship(
        back_populates="submission",
        cascade="all, delete-orphan",
        order_by="SubmissionAnswer.position",
    )
    topic_breakdown: Mapped[list["SubmissionTopic"]] = relationship(
        back_populates="submission",
        cascade="all, delete-orphan",
        order_by="SubmissionTopic.position",
    )


class SubmissionAnswer(Base):
    __tablename__ = "submission_answers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=_uuid)
    submission_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("submissions.id"), index=True
    )
    question_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("questions.id"))
    selected_option_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    response_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[GradingStatusEnum] = mapped_column(
        Enum(GradingStatusEnum, name="grading_status_enum"),
        default=GradingStatusEnum.GRADED,
    )
    is_correct: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    points_earned: Mapped[float] = mapped_column(Float, default=0.0)
    position: Mapped[int] = mapped_column(Integer, default=0)

    submission: Mapped["Submission"] = relationship(back_populates="answers")


class SubmissionTopic(Base):
    __tablename__ = "submission_topics"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=_uuid)
    submission_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("submissions.id"), index=True
    )
    topic_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("topics.id"))
    topic_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    correct: Mapped[int] = mapped_column(Integer, default=0)
    total: Mapped[int] = mapped_column(Integer, default=0)
    performance: Mapped[float] = mapped_column(Float, default=0.0)
    position: Mapped[int] = mapped_column(Integer, default=0)

    submission: Mapped["Submission"] = relationship(back_populates="topic_breakdown")
