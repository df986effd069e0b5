"""Question schemas."""

import uuid
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from discrete_quiz.schemas.topic import Difficulty


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    GRAPH_DRAWING = "graph_drawing"
    PROOF = "proof"
    CALCULATION = "calculation"


# Types whose answer is a single selected option
OPTION_GRADED_TYPES = frozenset({QuestionType.MULTIPLE_CHOICE, QuestionType.TRUE_FALSE})


class OptionCreate(BaseModel):
    text: str
    is_correct: bool = False
    explanation: str | None = None


class OptionRead(BaseModel):
    id: uuid.UUID
    text: str
    is_correct: bool
    explanation: str | None = None

    model_config = {"from_attributes": True}


class Solution(BaseModel):
    """Worked solution for proof / calculation items."""

    steps: list[str] = []
    final_answer: str | None = None


class GraphEdge(BaseModel):
    source: str = Field(..., alias="from")
    target: str = Field(..., alias="to")
    weight: float | None = None

    model_config = {"populate_by_name": True}


class GraphData(BaseModel):
    """Vertex/edge payload for graph-theory items."""

    vertices: list[str] = []
    edges: list[GraphEdge] = []
    is_directed: bool = False


class QuestionCreate(BaseModel):
    """POST /api/questions

    multiple_choice and true_false items need exactly one correct option;
    true_false items have exactly two options.
    """

    topic_id: uuid.UUID
    question_type: QuestionType = QuestionType.MULTIPLE_CHOICE
    difficulty: Difficulty = Difficulty.BASIC
    text: str = Field(..., min_length=1)
    images: list[str] | None = None
    options: list[OptionCreate] = []
    solution: Solution | None = None
    graph_data: GraphData | None = None
    hints: list[str] | None = None
    explanation: str | None = None
    points: float = Field(1.0, gt=0)

    @model_validator(mode="after")
    def _check_options(self) -> "QuestionCreate":
        if self.question_type in OPTION_GRADED_TYPES:
            correct = sum(1 for o in self.options if o.is_correct)
            if correct != 1:
                raise ValueError(
                    f"{self.question_type.value} questions need exactly one correct "
                    f"option, got {correct}"
                )
        if self.question_type == QuestionType.TRUE_FALSE and len(self.options) != 2:
            raise ValueError("true_false questions need exactly two options")
        return self


class QuestionRead(BaseModel):
    """A question with its options, as supplied to the grader."""

    id: uuid.UUID
    topic_id: uuid.UUID
    topic_name: str | None = None
    question_type: QuestionType
    difficulty: Difficulty
    text: str
    images: list[str] | None = None
    options: list[OptionRead] = []
    solution: Solution | None = None
    graph_data: GraphData | None = None
    hints: list[str] | None = None
    explanation: str | None = None
    points: float

    model_config = {"from_attributes": True}
