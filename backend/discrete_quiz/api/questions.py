"""Question routes."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, selectinload

from discrete_quiz.db.models import (
    DifficultyEnum,
    Question,
    QuestionOption,
    QuestionTypeEnum,
    Topic,
)
from discrete_quiz.db.session import get_db
from discrete_quiz.schemas.question import QuestionCreate, QuestionRead, QuestionType
from discrete_quiz.schemas.topic import Difficulty

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=QuestionRead, status_code=status.HTTP_201_CREATED)
def create_question(body: QuestionCreate, db: Session = Depends(get_db)):
    """Create a question with its options.

    Option rules per type are enforced by ``QuestionCreate``.
    """
    topic = db.get(Topic, body.topic_id)
    if topic is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found"
        )

    question = Question(
        topic=topic,
        question_type=QuestionTypeEnum(body.question_type.value),
        difficulty=DifficultyEnum(body.difficulty.value),
        text=body.text,
        images=body.images,
        solution=body.solution.model_dump() if body.solution else None,
        graph_data=body.graph_data.model_dump(by_alias=True) if body.graph_data else None,
        hints=body.hints,
        explanation=body.explanation,
        points=body.points,
        options=[
            QuestionOption(
                text=o.text,
                is_correct=o.is_correct,
                explanation=o.explanation,
                position=i,
            )
            for i, o in enumerate(body.options)
        ],
    )
    db.add(question)
    db.commit()
    db.refresh(question)
    logger.info(
        "Created %s question %s under topic %s",
        question.question_type.value, question.id, topic.name,
    )
    return question


@router.get("", response_model=list[QuestionRead])
def list_questions(
    topic_id: uuid.UUID | None = None,
    difficulty: Difficulty | None = None,
    question_type: QuestionType | None = None,
    db: Session = Depends(get_db),
):
    """List questions filtered by topic, difficulty and/or type."""
    query = db.query(Question).options(
        selectinload(Question.options), selectinload(Question.topic)
    )
    if topic_id is not None:
        query = query.filter(Question.topic_id == topic_id)
    if difficulty is not None:
        query = query.filter(Question.difficulty == DifficultyEnum(difficulty.value))
    if question_type is not None:
        query = query.filter(
            Question.question_type == QuestionTypeEnum(question_type.value)
        )
    return query.order_by(Question.created_at).all()


@router.get("/{question_id}", response_model=QuestionRead)
def get_question(question_id: uuid.UUID, db: Session = Depends(get_db)):
    question = db.get(Question, question_id)
    if question is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Question not found"
        )
    return question
