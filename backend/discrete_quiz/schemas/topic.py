"""Topic schemas."""

import uuid
from enum import Enum

from pydantic import BaseModel, Field


class TopicCategory(str, Enum):
    SET_THEORY = "Set Theory"
    LOGIC = "Logic"
    RELATIONS = "Relations"
    FUNCTIONS = "Functions"
    GRAPH_THEORY = "Graph Theory"
    TREES = "Trees"
    BOOLEAN_ALGEBRA = "Boolean Algebra"
    COMBINATORICS = "Combinatorics"
    PROBABILITY = "Probability"


class Difficulty(str, Enum):
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class TopicCreate(BaseModel):
    """POST /api/topics"""

    name: str = Field(..., min_length=1, max_length=200)
    category: TopicCategory
    description: str | None = None
    difficulty: Difficulty = Difficulty.BASIC


class TopicRead(BaseModel):
    id: uuid.UUID
    name: str
    category: TopicCategory
    description: str | None = None
    difficulty: Difficulty

    model_config = {"from_attributes": True}
