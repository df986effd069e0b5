"""Exceptions raised by the grading and analytics core.

The HTTP layer maps each ``error_code`` to a status code in ``main.py``.
"""

from __future__ import annotations

from typing import Any


class QuizServiceError(Exception):
    """Base class for deterministic grading/analytics failures."""

    error_code = "QUIZ_SERVICE_ERROR"

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or None


class NotFoundError(QuizServiceError):
    error_code = "NOT_FOUND"


class QuestionNotFoundError(NotFoundError):
    """An answer references a question that is not part of the quiz."""

    error_code = "QUESTION_NOT_FOUND"


class InvalidQuestionError(QuizServiceError):
    """An option-graded question has zero or several correct options."""

    error_code = "INVALID_QUESTION"


class InsufficientDataError(QuizServiceError):
    """Nothing to aggregate."""

    error_code = "INSUFFICIENT_DATA"
