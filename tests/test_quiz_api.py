from fastapi import status

from tests.conftest import login_admin, register


class TestQuestionsRoute:

    def test_requires_session(self, client, quiz_theme):
        response = client.get(f"/api/themes/{quiz_theme['id']}/questions")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_bad_id(self, client):
        register(client, "marie")
        response = client.get("/api/themes/abc/questions")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["error"] == "ValidationError"

    def test_player_does_not_see_answers(self, client, quiz_theme):
        register(client, "marie")

        response = client.get(f"/api/themes/{quiz_theme['id']}/questions")

        assert response.status_code == status.HTTP_200_OK
        questions = response.json()
        assert [q["id"] for q in questions] == quiz_theme["question_ids"]
        for q in questions:
            assert "correctAnswer" not in q
            assert "explanation" not in q
            assert len(q["options"]) == 4

    def test_admin_sees_answers(self, client, quiz_theme):
        login_admin(client)

        questions = client.get(f"/api/themes/{quiz_theme['id']}/questions").json()

        assert [q["correctAnswer"] for q in questions] == [1, 2]
        assert questions[0]["explanation"] == "Parce que."

    def test_unknown_theme(self, client):
        register(client, "marie")
        response = client.get("/api/themes/9999/questions")
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestSubmitRoute:

    def test_example_scenario(self, client, quiz_theme):
        register(client, "marie")
        q1, q2 = quiz_theme["question_ids"]

        response = client.post("/api/quiz/submit", json={
            "themeId": quiz_theme["id"],
            "answers": {str(q1): 1, str(q2): 0},
            "timeSpent": 45,
        })

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["score"] == 1
        assert data["totalQuestions"] == 2
        assert data["pointsEarned"] == 10
        assert data["results"] == [
            {"questionId": q1, "correct": True, "correctAnswer": 1},
            {"questionId": q2, "correct": False, "correctAnswer": 2},
        ]
        session = data["session"]
        assert session["themeId"] == quiz_theme["id"]
        assert session["score"] == 1
        assert session["timeSpent"] == 45
        assert "completedAt" in session

        me = client.get("/api/auth/me").json()["user"]
        assert me["points"] == 10

    def test_requires_session(self, client, quiz_theme):
        response = client.post("/api/quiz/submit", json={
            "themeId": quiz_theme["id"], "answers": {}, "timeSpent": 5,
        })
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_missing_time_spent(self, client, quiz_theme):
        register(client, "marie")
        response = client.post("/api/quiz/submit", json={"themeId": quiz_theme["id"], "answers": {}})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = [d["field"] for d in response.json()["detail"]["details"]]
        assert "timeSpent" in fields

    def test_time_spent_must_be_a_number(self, client, quiz_theme):
        register(client, "marie")
        response = client.post("/api/quiz/submit", json={
            "themeId": quiz_theme["id"], "answers": {}, "timeSpent": "45",
        })
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_negative_time_spent(self, client, quiz_theme):
        register(client, "marie")
        response = client.post("/api/quiz/submit", json={
            "themeId": quiz_theme["id"], "answers": {}, "timeSpent": -1,
        })
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_missing_answers(self, client, quiz_theme):
        register(client, "marie")
        response = client.post("/api/quiz/submit", json={"themeId": quiz_theme["id"], "timeSpent": 3})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_empty_answers_score_zero(self, client, quiz_theme):
        register(client, "marie")
        data = client.post("/api/quiz/submit", json={
            "themeId": quiz_theme["id"], "answers": {}, "timeSpent": 3,
        }).json()

        assert data["score"] == 0
        assert data["pointsEarned"] == 0

    def test_boolean_answer_is_malformed(self, client, quiz_theme):
        register(client, "marie")
        q1, _ = quiz_theme["question_ids"]
        response = client.post("/api/quiz/submit", json={
            "themeId": quiz_theme["id"], "answers": {str(q1): True}, "timeSpent": 3,
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["error"] == "ValidationError"

    def test_string_answer_is_malformed(self, client, quiz_theme):
        register(client, "marie")
        _, q2 = quiz_theme["question_ids"]
        response = client.post("/api/quiz/submit", json={
            "themeId": quiz_theme["id"], "answers": {str(q2): "2"}, "timeSpent": 3,
        })
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_rejected_submission_is_not_recorded(self, client, quiz_theme):
        register(client, "marie")
        q1, q2 = quiz_theme["question_ids"]
        client.post("/api/quiz/submit", json={
            "themeId": quiz_theme["id"], "answers": {str(q1): True, str(q2): "2"}, "timeSpent": 3,
        })

        me = client.get("/api/auth/me").json()["user"]
        assert me["points"] == 0


class TestStatsRoutes:

    def test_my_stats(self, client, quiz_theme):
        register(client, "marie")
        q1, q2 = quiz_theme["question_ids"]
        for answers, seconds in [({q1: 1, q2: 2}, 30), ({q1: 1}, 20)]:
            client.post("/api/quiz/submit", json={
                "themeId": quiz_theme["id"],
                "answers": {str(k): v for k, v in answers.items()},
                "timeSpent": seconds,
            })

        data = client.get("/api/users/me/stats").json()

        assert data["totalQuizzes"] == 2
        assert len(data["stats"]) == 1
        stats = data["stats"][0]
        assert stats["totalQuizzes"] == 2
        assert stats["bestScore"] == 2
        assert stats["averageScore"] == 2  # (2 + 1) / 2 = 1.5 rounds up
        assert stats["totalTimeSpent"] == 50
        assert [s["score"] for s in data["recentSessions"]] == [1, 2]

    def test_recent_sessions_are_capped(self, client, quiz_theme):
        register(client, "marie")
        for seconds in range(7):
            client.post("/api/quiz/submit", json={
                "themeId": quiz_theme["id"], "answers": {}, "timeSpent": seconds,
            })

        data = client.get("/api/users/me/stats").json()

        assert data["totalQuizzes"] == 7
        assert [s["timeSpent"] for s in data["recentSessions"]] == [6, 5, 4, 3, 2]

    def test_theme_stats(self, client, quiz_theme):
        register(client, "marie")
        assert client.get(f"/api/users/me/stats/{quiz_theme['id']}").json() == {"stats": None, "sessions": []}

        client.post("/api/quiz/submit", json={"themeId": quiz_theme["id"], "answers": {}, "timeSpent": 9})
        data = client.get(f"/api/users/me/stats/{quiz_theme['id']}").json()

        assert data["stats"]["totalQuizzes"] == 1
        assert len(data["sessions"]) == 1

    def test_requires_session(self, client):
        assert client.get("/api/users/me/stats").status_code == status.HTTP_401_UNAUTHORIZED


class TestLeaderboardRoutes:

    def test_global_leaderboard_is_public(self, client, quiz_theme):
        register(client, "marie")
        q1, q2 = quiz_theme["question_ids"]
        client.post("/api/quiz/submit", json={
            "themeId": quiz_theme["id"], "answers": {str(q1): 1, str(q2): 2}, "timeSpent": 5,
        })
        client.post("/api/auth/logout")

        response = client.get("/api/leaderboard/global")

        assert response.status_code == status.HTTP_200_OK
        board = response.json()
        assert board[0]["username"] == "marie"
        assert board[0]["totalScore"] == 2
        assert board[0]["rank"] == 1
        # Seeded accounts have points but no sessions
        admin_entry = next(e for e in board if e["username"] == "admin")
        assert admin_entry["totalScore"] == 0
        assert admin_entry["points"] == 5000

    def test_theme_leaderboard(self, client, quiz_theme):
        q1, q2 = quiz_theme["question_ids"]
        for username, answers in [("marie", {q1: 1}), ("paul", {q1: 1, q2: 2})]:
            register(client, username)
            client.post("/api/quiz/submit", json={
                "themeId": quiz_theme["id"],
                "answers": {str(k): v for k, v in answers.items()},
                "timeSpent": 5,
            })

        board = client.get(f"/api/leaderboard/theme/{quiz_theme['id']}").json()

        assert [(e["username"], e["bestScore"]) for e in board] == [("paul", 2), ("marie", 1)]

    def test_theme_leaderboard_bad_id(self, client):
        response = client.get("/api/leaderboard/theme/not-a-number")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
