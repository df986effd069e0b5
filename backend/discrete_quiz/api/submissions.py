"""Submission grading, retrieval and analytics routes."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, selectinload

from discrete_quiz.api.deps import get_quiz_detail
from discrete_quiz.db.models import (
    GradingStatusEnum,
    Submission,
    SubmissionAnswer,
    SubmissionTopic,
)
from discrete_quiz.db.session import get_db
from discrete_quiz.schemas.analytics import AnalyticsSummary
from discrete_quiz.schemas.quiz import QuizDetail
from discrete_quiz.schemas.submission import (
    GradedSubmission,
    SubmissionCreate,
    SubmissionRead,
)
from discrete_quiz.services.analytics import aggregate
from discrete_quiz.services.errors import QuizServiceError
from discrete_quiz.services.grading import grade, quiz_total_points

logger = logging.getLogger(__name__)
router = APIRouter()


def _to_row(graded: GradedSubmission) -> Submission:
    """Map a graded (unsaved) submission onto ORM rows."""
    return Submission(
        quiz_id=graded.quiz_id,
        learner_id=graded.learner_id,
        total_score=graded.total_score,
        total_points=graded.total_points,
        percentage=graded.percentage,
        pending_review=graded.pending_review,
        time_taken=graded.time_taken,
        submitted_at=graded.submitted_at,
        answers=[
            SubmissionAnswer(
                question_id=a.question_id,
                selected_option_id=a.selected_option_id,
                response_text=a.response_text,
                status=GradingStatusEnum(a.status.value),
                is_correct=a.is_correct,
                points_earned=a.points_earned,
                position=i,
            )
            for i, a in enumerate(graded.answers)
        ],
        topic_breakdown=[
            SubmissionTopic(
                topic_id=t.topic_id,
                topic_name=t.topic_name,
                correct=t.correct,
                total=t.total,
                performance=t.performance,
                position=i,
            )
            for i, t in enumerate(graded.topic_breakdown)
        ],
    )


def _submissions_query(db: Session):
    return db.query(Submission).options(
        selectinload(Submission.answers), selectinload(Submission.topic_breakdown)
    )


@router.post("", response_model=SubmissionRead, status_code=status.HTTP_201_CREATED)
def submit_answers(body: SubmissionCreate, db: Session = Depends(get_db)):
    """Grade a learner's answers and store the result.

    The stored submission is never updated afterwards.
    """
    quiz = get_quiz_detail(body.quiz_id, db)

    recomputed = quiz_total_points(quiz)
    if abs(recomputed - quiz.total_points) > 1e-9:
        logger.warning(
            "Quiz %s stored total_points=%s but its questions sum to %s; grading with %s",
            quiz.id, quiz.total_points, recomputed, recomputed,
        )

    try:
        graded = grade(quiz, body.answers, body.time_taken, learner_id=body.learner_id)
    except QuizServiceError as e:
        logger.warning("Grading failed for quiz %s: %s", quiz.id, e.message)
        raise

    row = _to_row(graded)
    db.add(row)
    db.commit()
    logger.info(
        "Graded submission %s for quiz %s: %.2f/%.2f (%.1f%%)",
        row.id, quiz.id, graded.total_score, graded.total_points, graded.percentage,
    )
    stored = _submissions_query(db).filter(Submission.id == row.id).one()
    return SubmissionRead.model_validate(stored)


@router.get("", response_model=list[SubmissionRead])
def list_submissions(
    quiz_id: uuid.UUID | None = None,
    learner_id: str | None = None,
    skip: int = 0,
    limit: int = 50,
    db: Session = Depends(get_db),
):
    """List stored submissions, newest first."""
    query = _submissions_query(db)
    if quiz_id is not None:
        query = query.filter(Submission.quiz_id == quiz_id)
    if learner_id is not None:
        query = query.filter(Submission.learner_id == learner_id)
    return query.order_by(Submission.submitted_at.desc()).offset(skip).limit(limit).all()


@router.get("/analytics/{quiz_id}", response_model=AnalyticsSummary)
def quiz_analytics(
    quiz: QuizDetail = Depends(get_quiz_detail),
    db: Session = Depends(get_db),
):
    """Aggregate every stored submission of a quiz.

    A quiz without submissions yields INSUFFICIENT_DATA (422).
    """
    rows = (
        _submissions_query(db)
        .filter(Submission.quiz_id == quiz.id)
        .order_by(Submission.submitted_at)
        .all()
    )
    submissions = [SubmissionRead.model_validate(r) for r in rows]
    return aggregate(submissions, quiz=quiz)


@router.get("/{submission_id}", response_model=SubmissionRead)
def get_submission(submission_id: uuid.UUID, db: Session = Depends(get_db)):
    row = _submissions_query(db).filter(Submission.id == submission_id).first()
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Submission not found"
        )
    return row
