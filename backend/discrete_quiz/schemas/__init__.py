"""Pydantic schemas — re‑exported for convenience."""

from discrete_quiz.schemas.common import ErrorResponse  # noqa: F401
from discrete_quiz.schemas.topic import (  # noqa: F401
    Difficulty,
    TopicCategory,
    TopicCreate,
    TopicRead,
)
from discrete_quiz.schemas.question import (  # noqa: F401
    GraphData,
    OptionCreate,
    OptionRead,
    QuestionCreate,
    QuestionRead,
    QuestionType,
    Solution,
)
from discrete_quiz.schemas.quiz import (  # noqa: F401
    QuizCreate,
    QuizDetail,
    QuizDifficulty,
    QuizRead,
)
from discrete_quiz.schemas.submission import (  # noqa: F401
    AnswerResult,
    AnswerSubmit,
    GradedSubmission,
    GradingStatus,
    SubmissionCreate,
    SubmissionRead,
    TopicBreakdown,
)
from discrete_quiz.schemas.analytics import (  # noqa: F401
    AnalyticsSummary,
    DifficultyDistribution,
    TopicPerformance,
)
