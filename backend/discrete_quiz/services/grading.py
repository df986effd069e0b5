"""Submission grading.

Each question type carries its own grading strategy:
  - multiple_choice / true_false: compare the selected option id with the
    question's single correct option.
  - graph_drawing / proof / calculation: nothing to compare automatically, so
    the answer is recorded as pending review and earns no points.

``grade`` is a pure function: it reads the quiz and answers, never mutates
them, and returns an unsaved ``GradedSubmission``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Sequence

from discrete_quiz.schemas.question import OptionRead, QuestionRead, QuestionType
from discrete_quiz.schemas.quiz import QuizDetail
from discrete_quiz.schemas.submission import (
    AnswerResult,
    AnswerSubmit,
    GradedSubmission,
    GradingStatus,
    TopicBreakdown,
)
from discrete_quiz.services.errors import InvalidQuestionError, QuestionNotFoundError


@dataclass
class _TopicTally:
    name: str | None
    correct: int = 0
    total: int = 0


# ── Per-type strategies ──────────────────────────────────────────────────────


def correct_option(question: QuestionRead) -> OptionRead:
    """Return the single option flagged correct, or raise InvalidQuestionError."""
    flagged = [o for o in question.options if o.is_correct]
    if len(flagged) != 1:
        raise InvalidQuestionError(
            f"Question {question.id} has {len(flagged)} correct options; exactly one is required",
            question_id=str(question.id),
            correct_options=len(flagged),
        )
    return flagged[0]


def _grade_by_option(question: QuestionRead, answer: AnswerSubmit) -> AnswerResult:
    expected = correct_option(question)
    is_correct = (
        answer.selected_option_id is not None
        and answer.selected_option_id == expected.id
    )
    return AnswerResult(
        question_id=question.id,
        selected_option_id=answer.selected_option_id,
        response_text=answer.response_text,
        status=GradingStatus.GRADED,
        is_correct=is_correct,
        points_earned=question.points if is_correct else 0.0,
    )


def _defer_to_review(question: QuestionRead, answer: AnswerSubmit) -> AnswerResult:
    return AnswerResult(
        question_id=question.id,
        selected_option_id=answer.selected_option_id,
        response_text=answer.response_text,
        status=GradingStatus.PENDING,
        is_correct=None,
        points_earned=0.0,
    )


_STRATEGIES: dict[QuestionType, Callable[[QuestionRead, AnswerSubmit], AnswerResult]] = {
    QuestionType.MULTIPLE_CHOICE: _grade_by_option,
    QuestionType.TRUE_FALSE: _grade_by_option,
    QuestionType.GRAPH_DRAWING: _defer_to_review,
    QuestionType.PROOF: _defer_to_review,
    QuestionType.CALCULATION: _defer_to_review,
}


def grade_answer(question: QuestionRead, answer: AnswerSubmit) -> AnswerResult:
    """Grade a single answer with the strategy for the question's type."""
    return _STRATEGIES[question.question_type](question, answer)


# ── Main grading function ────────────────────────────────────────────────────


def quiz_total_points(quiz: QuizDetail) -> float:
    """Sum of the points of the quiz's current questions."""
    return sum(q.points for q in quiz.questions)


def grade(
    quiz: QuizDetail,
    answers: Sequence[AnswerSubmit],
    time_taken: float | None,
    *,
    learner_id: str | None = None,
    submitted_at: datetime | None = None,
) -> GradedSubmission:
    """Grade one learner's answers against a fully resolved quiz.

    Args:
        quiz: Quiz with its questions (and their options) populated.
        answers: Submitted answers, in submission order.
        time_taken: Elapsed minutes reported by the client.
        learner_id: Opaque learner reference copied onto the record.
        submitted_at: Timestamp for the record; defaults to now (UTC).

    Returns:
        The scored, unsaved submission.

    Raises:
        QuestionNotFoundError: an answer names a question outside the quiz.
        InvalidQuestionError: an option-graded question lacks exactly one
            correct option.
    """
    questions: dict[uuid.UUID, QuestionRead] = {q.id: q for q in quiz.questions}

    results: list[AnswerResult] = []
    tallies: dict[uuid.UUID, _TopicTally] = {}  # insertion order = first-seen topic

    for answer in answers:
        question = questions.get(answer.question_id)
        if question is None:
            raise QuestionNotFoundError(
                f"Question {answer.question_id} is not part of quiz {quiz.id}",
                question_id=str(answer.question_id),
                quiz_id=str(quiz.id),
            )

        result = grade_answer(question, answer)
        results.append(result)

        if result.status is GradingStatus.PENDING:
            continue
        tally = tallies.setdefault(question.topic_id, _TopicTally(name=question.topic_name))
        tally.total += 1
        if result.is_correct:
            tally.correct += 1

    total_score = sum(r.points_earned for r in results)
    # Recomputed on every grade rather than trusting the stored quiz total
    total_points = quiz_total_points(quiz)
    percentage = total_score / total_points * 100 if total_points > 0 else 0.0

    breakdown = [
        TopicBreakdown(
            topic_id=topic_id,
            topic_name=t.name,
            correct=t.correct,
            total=t.total,
            performance=t.correct / t.total * 100,
        )
        for topic_id, t in tallies.items()
    ]

    return GradedSubmission(
        quiz_id=quiz.id,
        learner_id=learner_id,
        answers=results,
        topic_breakdown=breakdown,
        total_score=total_score,
        total_points=total_points,
        percentage=percentage,
        pending_review=sum(1 for r in results if r.status is GradingStatus.PENDING),
        time_taken=time_taken,
        submitted_at=submitted_at or datetime.now(timezone.utc),
    )
