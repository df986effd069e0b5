"""API route package — imports all routers for main.py."""

from discrete_quiz.api.health import router as health_router  # noqa: F401
from discrete_quiz.api.topics import router as topics_router  # noqa: F401
from discrete_quiz.api.questions import router as questions_router  # noqa: F401
from discrete_quiz.api.quizzes import router as quizzes_router  # noqa: F401
from discrete_quiz.api.submissions import router as submissions_router  # noqa: F401
