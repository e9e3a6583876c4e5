import pytest
import pytest_asyncio
from typing import List, Tuple
from fastapi.testclient import TestClient

from quizmaster.core.config import Settings
from quizmaster.db.session import Database
from quizmaster.main import create_app
from quizmaster.models.theme import Question, Theme
from quizmaster.models.user import User
from quizmaster.services.catalog import CatalogStore
from quizmaster.services.credentials import CredentialStore

ADMIN_EMAIL = "admin@quizmaster.com"
ADMIN_PASSWORD = "admin123"

OPTIONS = ["A", "B", "C", "D"]


# Service-level fixtures: a fresh in-memory store per test

@pytest_asyncio.fixture
async def database():
    database = Database("sqlite+aiosqlite://")
    await database.create_all()
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def db(database):
    async with database.sessionmaker() as session:
        yield session


async def make_user(db, username: str, role: str = "user", points: int = 0) -> User:
    return await CredentialStore(db).create_user(
        username=username,
        email=f"{username}@example.com",
        password="secret123",
        first_name=username.capitalize(),
        last_name="Test",
        role=role,
        points=points,
    )


async def make_theme(db, name: str, correct_answers: List[int], is_active: bool = True) -> Tuple[Theme, List[Question]]:
    catalog = CatalogStore(db)
    theme = await catalog.create_theme({
        "name": name,
        "description": f"Questions sur {name}",
        "icon": "fas fa-question",
        "color": "blue",
        "is_active": is_active,
    })
    questions = []
    for index, correct in enumerate(correct_answers):
        questions.append(await catalog.create_question(theme.id, {
            "question": f"{name} question {index + 1}",
            "options": OPTIONS,
            "correct_answer": correct,
            "difficulty": "easy",
            "explanation": f"La bonne réponse est {OPTIONS[correct]}",
        }))
    await db.commit()
    return theme, questions


# API fixtures: an app with the demo accounts seeded

@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        SECRET_KEY="test-secret-key",
        DATABASE_URL="sqlite+aiosqlite://",
        SEED_DATA=True,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(test_settings) -> TestClient:
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client


def login(client: TestClient, email: str, password: str) -> dict:
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["user"]


def login_admin(client: TestClient) -> dict:
    return login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


def register(client: TestClient, username: str, password: str = "secret123") -> dict:
    response = client.post("/api/auth/register", json={
        "username": username,
        "email": f"{username}@example.com",
        "password": password,
        "confirmPassword": password,
        "firstName": username.capitalize(),
        "lastName": "Test",
    })
    assert response.status_code == 200, response.text
    return response.json()["user"]


@pytest.fixture
def quiz_theme(client) -> dict:
    """A theme with two questions whose correct answers are 1 and 2."""
    login_admin(client)
    theme = client.post("/api/themes", json={
        "name": "Tests",
        "description": "Thème de test",
        "icon": "fas fa-vial",
        "color": "blue",
    }).json()
    question_ids = []
    for index, correct in enumerate([1, 2]):
        response = client.post(f"/api/themes/{theme['id']}/questions", json={
            "question": f"Question {index + 1}",
            "options": OPTIONS,
            "correctAnswer": correct,
            "difficulty": "easy",
            "explanation": "Parce que.",
        })
        assert response.status_code == 200, response.text
        question_ids.append(response.json()["id"])
    client.post("/api/auth/logout")
    return {"id": theme["id"], "question_ids": question_ids}
