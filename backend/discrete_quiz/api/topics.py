"""Topic reference-data routes."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from discrete_quiz.db.models import DifficultyEnum, Topic, TopicCategoryEnum
from discrete_quiz.db.session import get_db
from discrete_quiz.schemas.topic import TopicCategory, TopicCreate, TopicRead

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=TopicRead, status_code=status.HTTP_201_CREATED)
def create_topic(body: TopicCreate, db: Session = Depends(get_db)):
    topic = Topic(
        name=body.name,
        category=TopicCategoryEnum(body.category.value),
        description=body.description,
        difficulty=DifficultyEnum(body.difficulty.value),
    )
    db.add(topic)
    db.commit()
    db.refresh(topic)
    logger.info("Created topic %s (%s)", topic.name, topic.category.value)
    return topic


@router.get("", response_model=list[TopicRead])
def list_topics(
    category: TopicCategory | None = None,
    db: Session = Depends(get_db),
):
    """List topics, optionally narrowed to one category."""
    query = db.query(Topic)
    if category is not None:
        query = query.filter(Topic.category == TopicCategoryEnum(category.value))
    return query.order_by(Topic.name).all()
