"""End-to-end tests for notification endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from qna.interface.api.app import create_app
from tests.conftest import answer, ask, recorded_events, register
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create a running test client with test container."""
    app_instance = create_app(build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


class TestNotificationEndpoints:
    """End-to-end tests for notification API endpoints."""

    def test_answer_and_accept_notify(self, client):
        """Answering notifies the asker; accepting notifies the answerer."""
        # Arrange
        asker_id, asker = register(client, "asker")
        answerer_id, answerer = register(client, "answerer")
        question_id = ask(client, asker)

        # Act
        answer_id = answer(client, question_id, answerer)
        client.post(f"/answers/{answer_id}/accept", headers=asker)

        # Assert
        inbox = client.get("/notifications", headers=asker).json()
        assert inbox["unreadCount"] == 1
        [notification] = inbox["notifications"]
        assert notification["type"] == "new_answer"
        assert notification["message"] == "answerer answered your question"
        assert notification["sender"] == answerer_id
        assert notification["answer"] == answer_id

        accepted = client.get("/notifications", headers=answerer).json()
        assert accepted["notifications"][0]["type"] == "answer_accepted"

        recorder = recorded_events(client)
        sent = [
            (payload["type"], recipient)
            for (topic, payload), recipient in zip(
                recorder.events, recorder.recipients
            )
            if topic == "notification"
        ]
        assert [(kind, str(recipient)) for kind, recipient in sent] == [
            ("new_answer", asker_id),
            ("answer_accepted", answerer_id),
        ]

    def test_comment_notifies_post_author(self, client):
        _, asker = register(client, "asker")
        _, critic = register(client, "critic")
        question_id = ask(client, asker)

        client.post(
            "/comments",
            json={"target": question_id, "targetType": "question", "body": "Hm"},
            headers=critic,
        )

        inbox = client.get("/notifications", headers=asker).json()
        assert inbox["notifications"][0]["type"] == "comment_on_question"

    def test_mark_read_and_unread_count(self, client):
        # Arrange
        _, asker = register(client, "asker")
        _, answerer = register(client, "answerer")
        question_id = ask(client, asker)
        answer(client, question_id, answerer)
        answer(client, question_id, answerer)

        # Act & Assert
        count = client.get("/notifications/unread-count", headers=asker)
        assert count.json() == {"count": 2}

        first_id = client.get("/notifications", headers=asker).json()[
            "notifications"
        ][0]["id"]
        read = client.put(f"/notifications/{first_id}/read", headers=asker)
        assert read.status_code == 200
        assert read.json()["isRead"] is True

        unread = client.get(
            "/notifications", params={"unreadOnly": "true"}, headers=asker
        ).json()
        assert unread["pagination"]["total"] == 1

        marked = client.put("/notifications/read-all", headers=asker)
        assert marked.json() == {"updated": 1}
        assert client.get("/notifications/unread-count", headers=asker).json() == {
            "count": 0
        }

    def test_delete_notification(self, client):
        _, asker = register(client, "asker")
        _, answerer = register(client, "answerer")
        question_id = ask(client, asker)
        answer(client, question_id, answerer)
        notification_id = client.get("/notifications", headers=asker).json()[
            "notifications"
        ][0]["id"]

        # Another user can't see or remove it
        assert (
            client.delete(f"/notifications/{notification_id}", headers=answerer)
            .status_code
            == 404
        )
        assert (
            client.delete(f"/notifications/{notification_id}", headers=asker)
            .status_code
            == 204
        )
        assert client.get("/notifications", headers=asker).json()["notifications"] == []

    def test_notifications_require_token(self, client):
        assert client.get("/notifications").status_code == 401
        assert client.get("/notifications/unread-count").status_code == 401
        assert client.put(f"/notifications/{uuid4()}/read").status_code == 401
