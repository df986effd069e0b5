"""Cross-submission analytics for a quiz.

Pure reduction over already graded submissions; nothing is re-graded.
"""

from __future__ import annotations

import uuid
from collections import Counter
from typing import Sequence

from discrete_quiz.schemas.analytics import (
    AnalyticsSummary,
    DifficultyDistribution,
    TopicPerformance,
)
from discrete_quiz.schemas.quiz import QuizDetail
from discrete_quiz.schemas.submission import GradedSubmission
from discrete_quiz.services.errors import InsufficientDataError


def _difficulty_distribution(
    submissions: Sequence[GradedSubmission], quiz: QuizDetail
) -> DifficultyDistribution:
    """Count the difficulty tier of every answered question.

    Answers to questions that are no longer in the quiz are skipped.
    """
    difficulty_of = {q.id: q.difficulty.value for q in quiz.questions}
    counts: Counter[str] = Counter()
    for sub in submissions:
        for answer in sub.answers:
            tier = difficulty_of.get(answer.question_id)
            if tier is not None:
                counts[tier] += 1
    return DifficultyDistribution(**counts)


def aggregate(
    submissions: Sequence[GradedSubmission],
    quiz: QuizDetail | None = None,
) -> AnalyticsSummary:
    """Summarise graded submissions.

    Topic performance is an unweighted mean: each submission's topic
    performance counts once, however many questions it covered.  The
    difficulty distribution needs the quiz's question metadata and is
    ``None`` without it.

    Raises:
        InsufficientDataError: ``submissions`` is empty.
    """
    if not submissions:
        raise InsufficientDataError(
            "No submissions to aggregate",
            quiz_id=str(quiz.id) if quiz is not None else None,
        )

    average_score = sum(s.percentage for s in submissions) / len(submissions)

    performances: dict[uuid.UUID, list[float]] = {}
    names: dict[uuid.UUID, str | None] = {}
    for sub in submissions:
        for tb in sub.topic_breakdown:
            performances.setdefault(tb.topic_id, []).append(tb.performance)
            # Keep the first non-empty name seen for the topic
            if names.get(tb.topic_id) is None:
                names[tb.topic_id] = tb.topic_name

    topic_wise = [
        TopicPerformance(
            topic_id=topic_id,
            topic_name=names[topic_id],
            average_performance=sum(values) / len(values),
            submissions=len(values),
        )
        for topic_id, values in performances.items()
    ]

    return AnalyticsSummary(
        quiz_id=quiz.id if quiz is not None else None,
        total_submissions=len(submissions),
        average_score=average_score,
        topic_wise_performance=topic_wise,
        difficulty_distribution=(
            _difficulty_distribution(submissions, quiz) if quiz is not None else None
        ),
    )
