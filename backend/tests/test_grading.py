"""Unit tests for the submission grader."""

import uuid
from datetime import datetime, timezone

import pytest

from discrete_quiz.schemas.question import OptionRead, QuestionRead, QuestionType
from discrete_quiz.schemas.quiz import QuizDetail, QuizDifficulty
from discrete_quiz.schemas.submission import AnswerSubmit, GradingStatus
from discrete_quiz.schemas.topic import Difficulty
from discrete_quiz.services.errors import (
    InvalidQuestionError,
    NotFoundError,
    QuestionNotFoundError,
)
from discrete_quiz.services.grading import correct_option, grade, quiz_total_points

LOGIC = uuid.uuid4()
GRAPHS = uuid.uuid4()


# ── Helpers ────────────────────────────────────────────────────────────────────


def _question(
    topic_id: uuid.UUID = LOGIC,
    points: float = 5,
    flags: tuple[bool, ...] = (True, False),
    question_type: QuestionType = QuestionType.MULTIPLE_CHOICE,
    topic_name: str | None = "Logic",
) -> QuestionRead:
    return QuestionRead(
        id=uuid.uuid4(),
        topic_id=topic_id,
        topic_name=topic_name,
        question_type=question_type,
        difficulty=Difficulty.BASIC,
        text="Which is it?",
        options=[
            OptionRead(id=uuid.uuid4(), text=f"option {i}", is_correct=flag)
            for i, flag in enumerate(flags)
        ],
        points=points,
    )


def _quiz(*questions: QuestionRead, total_points: float | None = None) -> QuizDetail:
    return QuizDetail(
        id=uuid.uuid4(),
        title="Sample",
        difficulty=QuizDifficulty.MIXED,
        duration_minutes=10,
        total_points=sum(q.points for q in questions) if total_points is None else total_points,
        question_ids=[q.id for q in questions],
        created_at=datetime.now(timezone.utc),
        questions=list(questions),
    )


def _right(q: QuestionRead) -> AnswerSubmit:
    return AnswerSubmit(question_id=q.id, selected_option_id=correct_option(q).id)


def _wrong(q: QuestionRead) -> AnswerSubmit:
    other = next(o for o in q.options if not o.is_correct)
    return AnswerSubmit(question_id=q.id, selected_option_id=other.id)


# ── Scoring ───────────────────────────────────────────────────────────────────


class TestScoring:
    def test_logic_and_graph_example(self):
        q1 = _question(LOGIC, points=5, topic_name="Logic")
        q2 = _question(GRAPHS, points=10, topic_name="Graph Theory")
        quiz = _quiz(q1, q2)

        result = grade(quiz, [_right(q1), _wrong(q2)], time_taken=4.5)

        assert result.total_score == 5
        assert result.percentage == pytest.approx(5 / 15 * 100)
        assert result.time_taken == 4.5
        assert [(t.topic_name, t.correct, t.total, t.performance) for t in result.topic_breakdown] == [
            ("Logic", 1, 1, 100.0),
            ("Graph Theory", 0, 1, 0.0),
        ]
        assert [a.points_earned for a in result.answers] == [5, 0]
        assert [a.is_correct for a in result.answers] == [True, False]

    def test_all_correct_is_full_marks(self):
        questions = [_question(points=p) for p in (1, 2.5, 7)]
        result = grade(_quiz(*questions), [_right(q) for q in questions], time_taken=1)
        assert result.percentage == pytest.approx(100.0)
        assert result.total_score == pytest.approx(10.5)

    def test_all_wrong_scores_zero(self):
        questions = [_question(points=p, flags=(False, True, False)) for p in (3, 4)]
        result = grade(_quiz(*questions), [_wrong(q) for q in questions], time_taken=1)
        assert result.total_score == 0
        assert result.percentage == 0

    def test_points_sum_matches_total_score(self):
        questions = [_question(points=p) for p in (1, 2, 3, 4)]
        answers = [_right(questions[0]), _wrong(questions[1]), _right(questions[3])]
        result = grade(_quiz(*questions), answers, time_taken=None)
        assert sum(a.points_earned for a in result.answers) == result.total_score == 5

    def test_missing_selection_is_incorrect(self):
        q = _question()
        result = grade(_quiz(q), [AnswerSubmit(question_id=q.id)], time_taken=1)
        assert result.answers[0].is_correct is False
        assert result.total_score == 0

    def test_unanswered_questions_still_count_toward_total(self):
        q1, q2 = _question(points=5), _question(points=5)
        result = grade(_quiz(q1, q2), [_right(q1)], time_taken=1)
        assert result.percentage == pytest.approx(50.0)
        assert len(result.answers) == 1

    def test_zero_total_points_gives_zero_percentage(self):
        result = grade(_quiz(), [], time_taken=0)
        assert result.total_points == 0
        assert result.percentage == 0
        assert result.topic_breakdown == []

    def test_total_points_recomputed_from_questions(self):
        q = _question(points=4)
        quiz = _quiz(q, total_points=40)  # stale stored total
        result = grade(quiz, [_right(q)], time_taken=1)
        assert result.total_points == 4
        assert result.percentage == pytest.approx(100.0)
        assert quiz_total_points(quiz) == 4

    def test_learner_and_timestamp_are_copied(self):
        q = _question()
        stamp = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)
        result = grade(_quiz(q), [_right(q)], 2, learner_id="learner-7", submitted_at=stamp)
        assert result.learner_id == "learner-7"
        assert result.submitted_at == stamp


# ── Topic breakdown ───────────────────────────────────────────────────────────


class TestTopicBreakdown:
    def test_first_seen_topic_order(self):
        g1, l1, g2 = _question(GRAPHS, topic_name="Graph Theory"), _question(LOGIC), _question(GRAPHS, topic_name="Graph Theory")
        result = grade(_quiz(g1, l1, g2), [_right(g1), _wrong(l1), _wrong(g2)], time_taken=1)
        assert [t.topic_id for t in result.topic_breakdown] == [GRAPHS, LOGIC]
        graphs = result.topic_breakdown[0]
        assert (graphs.correct, graphs.total) == (1, 2)
        assert graphs.performance == pytest.approx(50.0)

    def test_breakdown_bounds_hold(self):
        questions = [_question(LOGIC) for _ in range(3)] + [_question(GRAPHS) for _ in range(2)]
        answers = [_right(q) if i % 2 else _wrong(q) for i, q in enumerate(questions)]
        result = grade(_quiz(*questions), answers, time_taken=1)
        for tb in result.topic_breakdown:
            assert 0 <= tb.correct <= tb.total
            assert tb.total > 0
            assert tb.performance == pytest.approx(tb.correct / tb.total * 100)

    def test_inputs_are_not_mutated(self):
        q = _question()
        quiz = _quiz(q)
        answers = [_right(q)]
        before = (quiz.model_dump(), [a.model_dump() for a in answers])
        grade(quiz, answers, time_taken=1)
        assert (quiz.model_dump(), [a.model_dump() for a in answers]) == before


# ── Question types ────────────────────────────────────────────────────────────


class TestQuestionTypes:
    def test_true_false_graded_by_option(self):
        q = _question(question_type=QuestionType.TRUE_FALSE, flags=(False, True))
        result = grade(_quiz(q), [_right(q)], time_taken=1)
        assert result.answers[0].status == GradingStatus.GRADED
        assert result.answers[0].is_correct is True

    @pytest.mark.parametrize(
        "question_type",
        [QuestionType.PROOF, QuestionType.CALCULATION, QuestionType.GRAPH_DRAWING],
    )
    def test_review_only_types_are_pending(self, question_type):
        proof = _question(question_type=question_type, flags=(), points=10)
        mcq = _question(points=10)
        answers = [
            AnswerSubmit(question_id=proof.id, response_text="By induction on n…"),
            _right(mcq),
        ]
        result = grade(_quiz(proof, mcq), answers, time_taken=1)

        pending = result.answers[0]
        assert pending.status == GradingStatus.PENDING
        assert pending.is_correct is None
        assert pending.points_earned == 0
        assert pending.response_text == "By induction on n…"
        assert result.pending_review == 1
        assert result.total_score == 10
        assert result.percentage == pytest.approx(50.0)
        # Pending answers are left out of the topic tally
        assert [(t.correct, t.total) for t in result.topic_breakdown] == [(1, 1)]


# ── Failures ──────────────────────────────────────────────────────────────────


class TestGradingFailures:
    def test_two_correct_options_is_invalid(self):
        q = _question(flags=(True, True, False))
        with pytest.raises(InvalidQuestionError) as exc:
            grade(_quiz(q), [AnswerSubmit(question_id=q.id, selected_option_id=q.options[0].id)], 1)
        assert exc.value.error_code == "INVALID_QUESTION"
        assert exc.value.details["correct_options"] == 2

    def test_no_correct_option_is_invalid(self):
        q = _question(flags=(False, False))
        with pytest.raises(InvalidQuestionError):
            grade(_quiz(q), [AnswerSubmit(question_id=q.id, selected_option_id=q.options[0].id)], 1)

    def test_unknown_question_is_not_found(self):
        q = _question()
        stray = AnswerSubmit(question_id=uuid.uuid4(), selected_option_id=uuid.uuid4())
        with pytest.raises(QuestionNotFoundError) as exc:
            grade(_quiz(q), [_right(q), stray], time_taken=1)
        assert isinstance(exc.value, NotFoundError)
        assert exc.value.details["question_id"] == str(stray.question_id)

    def test_identifier_must_match_exactly(self):
        q = _question()
        # Same option text on a different question does not count
        other = _question()
        answer = AnswerSubmit(question_id=q.id, selected_option_id=correct_option(other).id)
        result = grade(_quiz(q, other), [answer], time_taken=1)
        assert result.answers[0].is_correct is False
