"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

from qna.domain.model import Answer, Question, User
from qna.domain.service import Broadcaster
from qna.domain.value import AnswerId, QuestionId, UserId
from qna.domain.value.types import TagName, Username


def make_user(username: str, reputation: int = 0) -> User:
    """Helper function to build a user with a fresh ID.

    Args:
        username: Valid username
        reputation: Starting reputation

    Returns:
        User entity (not saved)
    """
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        reputation=reputation,
        created_at=datetime.now(),
    )


def make_question(
    author_id: UserId,
    title: str = "How do I await a coroutine?",
    tags: list[str] | None = None,
    vote_score: int = 0,
) -> Question:
    """Helper function to build a question with a fresh ID."""
    now = datetime.now()
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        body="I keep getting a coroutine object instead of a result.",
        author_id=author_id,
        tags=[TagName(t) for t in (tags or ["python"])],
        vote_score=vote_score,
        created_at=now,
        last_activity_at=now,
    )


def make_answer(question_id: QuestionId, author_id: UserId) -> Answer:
    """Helper function to build an answer with a fresh ID."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        body="Use the await keyword inside an async function.",
        created_at=datetime.now(),
    )


def register(client, username: str) -> tuple[str, dict]:
    """Create a user over HTTP.

    Returns:
        The user's ID and bearer headers for their token
    """
    response = client.post("/users", json={"username": username})
    assert response.status_code == 201
    body = response.json()
    return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}


def ask(client, headers: dict) -> str:
    """Ask a question over HTTP and return its ID."""
    response = client.post(
        "/questions",
        json={
            "title": "How do I cancel an asyncio task?",
            "body": "task.cancel() doesn't seem to stop it.",
            "tags": ["Python", "asyncio"],
        },
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["id"]


def answer(client, question_id: str, headers: dict) -> str:
    """Answer a question over HTTP and return the answer's ID."""
    response = client.post(
        f"/questions/{question_id}/answers",
        json={"body": "Await the task after cancelling it."},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["id"]


def recorded_events(client):
    """The recording broadcaster behind a running TestClient.

    The client must be entered (``with TestClient(...)``) so its event loop
    portal exists.
    """
    container = client.app.state.dishka_container
    return client.portal.call(container.get, Broadcaster)
