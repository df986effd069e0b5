"""Quiz composition and retrieval routes."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, selectinload

from discrete_quiz.api.deps import get_quiz_detail
from discrete_quiz.config import settings
from discrete_quiz.db.models import (
    Question,
    Quiz,
    QuizDifficultyEnum,
    QuizQuestion,
    Topic,
)
from discrete_quiz.db.session import get_db
from discrete_quiz.schemas.quiz import QuizCreate, QuizDetail, QuizRead

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=QuizDetail, status_code=status.HTTP_201_CREATED)
def create_quiz(body: QuizCreate, db: Session = Depends(get_db)):
    """Compose a quiz from existing questions.

    total_points is summed from the referenced questions; topics default to
    the questions' topics in first-seen order.
    """
    if len(set(body.question_ids)) != len(body.question_ids):
        raise HTTPException(
            status_code=422,
            detail="A question may appear only once per quiz",
        )

    rows = db.query(Question).filter(Question.id.in_(body.question_ids)).all()
    by_id = {q.id: q for q in rows}
    missing = [str(qid) for qid in body.question_ids if qid not in by_id]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Questions not found: {', '.join(missing)}",
        )
    questions = [by_id[qid] for qid in body.question_ids]

    if body.topic_ids is not None:
        topics = db.query(Topic).filter(Topic.id.in_(body.topic_ids)).all()
        if len(topics) != len(set(body.topic_ids)):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found"
            )
    else:
        seen: dict[uuid.UUID, Topic] = {}
        for q in questions:
            seen.setdefault(q.topic_id, q.topic)
        topics = list(seen.values())

    quiz = Quiz(
        title=body.title,
        difficulty=QuizDifficultyEnum(body.difficulty.value),
        duration_minutes=body.duration_minutes or settings.DEFAULT_QUIZ_DURATION_MINUTES,
        total_points=sum(q.points for q in questions),
        topics=topics,
        quiz_questions=[
            QuizQuestion(question=q, position=i) for i, q in enumerate(questions)
        ],
    )
    db.add(quiz)
    db.commit()
    logger.info(
        "Created quiz '%s' with %d questions (%.1f points)",
        quiz.title, len(questions), quiz.total_points,
    )
    return get_quiz_detail(quiz.id, db)


@router.get("", response_model=list[QuizRead])
def list_quizzes(
    skip: int = 0,
    limit: int = 50,
    db: Session = Depends(get_db),
):
    return (
        db.query(Quiz)
        .options(selectinload(Quiz.quiz_questions), selectinload(Quiz.topics))
        .order_by(Quiz.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


@router.get("/{quiz_id}", response_model=QuizDetail)
def get_quiz(quiz: QuizDetail = Depends(get_quiz_detail)):
    """Return a quiz with its questions and topics populated."""
    return quiz
