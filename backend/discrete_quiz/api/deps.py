"""FastAPI dependencies and lookups shared across routes."""

import uuid

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session, selectinload

from discrete_quiz.db.models import Question, Quiz, QuizQuestion
from discrete_quiz.db.session import get_db
from discrete_quiz.schemas.quiz import QuizDetail


def load_quiz(db: Session, quiz_id: uuid.UUID) -> Quiz:
    """Fetch a quiz with questions, options and topics eagerly loaded, or 404."""
    quiz = (
        db.query(Quiz)
        .options(
            selectinload(Quiz.quiz_questions)
            .selectinload(QuizQuestion.question)
            .selectinload(Question.options),
            selectinload(Quiz.quiz_questions)
            .selectinload(QuizQuestion.question)
            .selectinload(Question.topic),
            selectinload(Quiz.topics),
        )
        .filter(Quiz.id == quiz_id)
        .first()
    )
    if quiz is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Quiz not found"
        )
    return quiz


def get_quiz_detail(quiz_id: uuid.UUID, db: Session = Depends(get_db)) -> QuizDetail:
    """Path dependency — resolve ``quiz_id`` into a fully populated QuizDetail."""
    return QuizDetail.model_validate(load_quiz(db, quiz_id))
