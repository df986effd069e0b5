"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse

from discrete_quiz.config import settings
from discrete_quiz.api import (
    health_router,
    questions_router,
    quizzes_router,
    submissions_router,
    topics_router,
)
from discrete_quiz.db.session import create_tables
from discrete_quiz.schemas.common import ErrorResponse
from discrete_quiz.services.errors import (
    InsufficientDataError,
    InvalidQuestionError,
    NotFoundError,
    QuizServiceError,
)

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s  %(name)-25s  %(levelname)-8s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Discrete-math quiz backend starting…")
    if settings.AUTO_CREATE_TABLES:
        create_tables()
    yield
    logger.info("✅ Discrete-math quiz backend shut down")


app = FastAPI(
    title="Discrete Math Quiz API",
    description="Timed discrete-mathematics quizzes with per-topic grading analytics",
    version="0.1.0",
    lifespan=lifespan,
)

# ── Middleware ─────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)

# ── Error mapping ─────────────────────────────────────────────────────────────

_STATUS_BY_ERROR: list[tuple[type[QuizServiceError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidQuestionError, 422),
    (InsufficientDataError, 422),
]


@app.exception_handler(QuizServiceError)
async def quiz_service_error_handler(request: Request, exc: QuizServiceError):
    status_code = next(
        (code for kind, code in _STATUS_BY_ERROR if isinstance(exc, kind)),
        status.HTTP_400_BAD_REQUEST,
    )
    body = ErrorResponse(
        error_code=exc.error_code, message=exc.message, details=exc.details
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ── Routers ───────────────────────────────────────────────────────────────────

app.include_router(health_router, tags=["Health"])
app.include_router(topics_router, prefix="/api/topics", tags=["Topics"])
app.include_router(questions_router, prefix="/api/questions", tags=["Questions"])
app.include_router(quizzes_router, prefix="/api/quizzes", tags=["Quizzes"])
app.include_router(submissions_router, prefix="/api/submissions", tags=["Submissions"])


@app.get("/")
async def root():
    return {
        "name": "Discrete Math Quiz API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
