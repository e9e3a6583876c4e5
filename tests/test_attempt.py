import pytest
from sqlalchemy import select

from quizmaster.core.errors import NotFound
from quizmaster.models.quiz_session import QuizSession
from quizmaster.schemas.quiz import QuizSubmission
from quizmaster.schemas.theme import QuestionOut, QuestionPublic
from quizmaster.services.attempt import AttemptEngine, score_answers
from quizmaster.services.stats import StatisticsAggregator
from tests.conftest import make_theme, make_user


class TestScoreAnswers:

    async def test_example_scenario(self, db):
        _, (q1, q2) = await make_theme(db, "Sciences", [1, 2])

        score, results = score_answers([q1, q2], {q1.id: 1, q2.id: 0})

        assert score == 1
        assert results[0].correct is True
        assert results[1].correct is False
        assert results[1].correct_answer == 2

    async def test_empty_answers_score_zero(self, db):
        _, questions = await make_theme(db, "Sciences", [0, 1, 2])

        score, results = score_answers(questions, {})

        assert score == 0
        assert all(not r.correct for r in results)

    async def test_invalid_indexes_are_wrong_not_errors(self, db):
        _, (q1, q2, q3) = await make_theme(db, "Sciences", [0, 1, 3])

        score, _ = score_answers([q1, q2, q3], {q1.id: 7, q2.id: -1, q3.id: None, 9999: 3})

        assert score == 0


class TestAttemptEngine:

    async def test_submit_records_session_and_stats(self, db):
        user = await make_user(db, "alice")
        theme, (q1, q2) = await make_theme(db, "Sciences", [1, 2])
        engine = AttemptEngine(db)

        result = await engine.submit_attempt(
            QuizSubmission(theme_id=theme.id, answers={q1.id: 1, q2.id: 2}, time_spent=25), user
        )

        assert result.score == 2
        assert result.total_questions == 2
        assert result.points_earned == 20
        assert result.session.time_spent == 25
        assert 0 <= result.score <= result.total_questions

        stats = await StatisticsAggregator(db).get_user_stats_by_theme(user.id, theme.id)
        assert stats.total_quizzes == 1
        assert stats.best_score == 2
        assert user.points == 20

    async def test_two_submissions_are_independent_sessions(self, db):
        user = await make_user(db, "alice")
        theme, (q1,) = await make_theme(db, "Sciences", [3])
        engine = AttemptEngine(db)
        submission = QuizSubmission(theme_id=theme.id, answers={q1.id: 3}, time_spent=10)

        first = await engine.submit_attempt(submission, user)
        second = await engine.submit_attempt(submission, user)

        assert first.session.id != second.session.id
        stats = await StatisticsAggregator(db).get_user_stats_by_theme(user.id, theme.id)
        assert stats.total_quizzes == 2
        assert stats.total_time_spent == 20

    async def test_theme_without_questions(self, db):
        user = await make_user(db, "alice")
        theme, _ = await make_theme(db, "Vide", [])

        result = await AttemptEngine(db).submit_attempt(
            QuizSubmission(theme_id=theme.id, answers={}, time_spent=0), user
        )

        assert result.score == 0
        assert result.total_questions == 0
        assert result.results == []
        stats = await StatisticsAggregator(db).get_user_stats_by_theme(user.id, theme.id)
        assert stats.average_score == 0

    async def test_missing_theme_creates_nothing(self, db):
        user = await make_user(db, "alice")

        with pytest.raises(NotFound):
            await AttemptEngine(db).submit_attempt(
                QuizSubmission(theme_id=404, answers={}, time_spent=5), user
            )

        sessions = (await db.execute(select(QuizSession))).scalars().all()
        assert sessions == []
        assert user.points == 0

    async def test_start_attempt_hides_answers_from_players(self, db):
        user = await make_user(db, "alice")
        theme, questions = await make_theme(db, "Sciences", [1, 2])

        listed = await AttemptEngine(db).start_attempt(theme.id, user)

        assert [q.id for q in listed] == [q.id for q in questions]
        assert all(type(q) is QuestionPublic for q in listed)
        dumped = listed[0].model_dump(by_alias=True)
        assert "correctAnswer" not in dumped
        assert "explanation" not in dumped

    async def test_start_attempt_shows_answers_to_admins(self, db):
        admin = await make_user(db, "root", role="admin")
        theme, _ = await make_theme(db, "Sciences", [1, 2])

        listed = await AttemptEngine(db).start_attempt(theme.id, admin)

        assert all(isinstance(q, QuestionOut) for q in listed)
        assert [q.correct_answer for q in listed] == [1, 2]

    async def test_inactive_theme_is_not_playable(self, db):
        user = await make_user(db, "alice")
        admin = await make_user(db, "root", role="admin")
        theme, _ = await make_theme(db, "Archives", [0], is_active=False)
        engine = AttemptEngine(db)

        with pytest.raises(NotFound):
            await engine.start_attempt(theme.id, user)
        assert len(await engine.start_attempt(theme.id, admin)) == 1

    async def test_missing_theme_not_found(self, db):
        user = await make_user(db, "alice")

        with pytest.raises(NotFound):
            await AttemptEngine(db).start_attempt(12345, user)
