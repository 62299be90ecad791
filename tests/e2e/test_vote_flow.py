"""End-to-end tests for voting over HTTP."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from qna.interface.api.app import create_app
from tests.conftest import ask, recorded_events, register
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


class TestVoteFlow:
    """End-to-end tests for the vote API.

    Note: These tests focus on the HTTP API interface layer.
    Ledger transitions are covered in detail by unit tests.
    """

    def test_vote_lifecycle_on_question(self, client):
        """Create, flip, inspect and retract a vote on a question."""
        # Arrange
        _, asker = register(client, "asker")
        voter_id, voter = register(client, "voter")
        question_id = ask(client, asker)

        # Act & Assert - create
        response = client.post(
            f"/votes/question/{question_id}",
            json={"voteType": "upvote"},
            headers=voter,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["action"] == "created"
        assert body["newReputation"] == 5
        assert body["voteScore"] == 1
        assert body["vote"]["voteType"] == "upvote"
        assert body["vote"]["targetType"] == "question"

        # Flip through the generic endpoint; reputation floors at zero
        response = client.post(
            "/votes",
            json={
                "target": question_id,
                "targetType": "question",
                "voteType": "downvote",
            },
            headers=voter,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["action"] == "updated"
        assert body["voteScore"] == -1
        assert body["newReputation"] == 0

        stats = client.get(f"/votes/question/{question_id}").json()
        assert stats == {"upvotes": 0, "downvotes": 1, "total": -1}

        mine = client.get(f"/votes/question/{question_id}/user", headers=voter)
        assert mine.json() == {"voteType": "downvote"}

        listed = client.get(f"/votes/user/{voter_id}").json()
        assert len(listed["votes"]) == 1
        assert listed["pagination"]["total"] == 1
        assert listed["pagination"]["hasNext"] is False

        # Retract
        response = client.delete(f"/votes/question/{question_id}", headers=voter)
        assert response.status_code == 200
        body = response.json()
        assert body["action"] == "removed"
        assert body["voteScore"] == 0
        assert body["newReputation"] == 2

        question = client.get(f"/questions/{question_id}").json()
        assert question["voteScore"] == 0

    def test_answer_vote_pays_answer_author(self, client):
        # Arrange
        _, asker = register(client, "asker")
        answerer_id, answerer = register(client, "answerer")
        _, voter = register(client, "voter")
        question_id = ask(client, asker)
        answer = client.post(
            f"/questions/{question_id}/answers",
            json={"body": "Await the task after cancelling it."},
            headers=answerer,
        ).json()

        # Act
        response = client.post(
            f"/votes/answer/{answer['id']}",
            json={"voteType": "upvote"},
            headers=voter,
        )

        # Assert
        assert response.json()["newReputation"] == 10
        profile = client.get("/users/answerer").json()
        assert profile["id"] == answerer_id
        assert profile["reputation"] == 10

    def test_vote_without_token_is_unauthorized(self, client):
        """Should return 401 with a bearer challenge when not authenticated."""
        response = client.post(
            f"/votes/question/{uuid4()}", json={"voteType": "upvote"}
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_vote_with_invalid_token_is_unauthorized(self, client):
        response = client.post(
            f"/votes/question/{uuid4()}",
            json={"voteType": "upvote"},
            headers={"Authorization": "Bearer invalid-token"},
        )

        assert response.status_code == 401

    def test_self_vote_is_bad_request(self, client):
        _, asker = register(client, "asker")
        question_id = ask(client, asker)

        response = client.post(
            f"/votes/question/{question_id}",
            json={"voteType": "upvote"},
            headers=asker,
        )

        assert response.status_code == 400
        assert "own content" in response.json()["detail"]

    def test_vote_on_missing_target_is_not_found(self, client):
        _, voter = register(client, "voter")

        response = client.post(
            "/votes",
            json={"target": str(uuid4()), "targetType": "answer", "voteType": "upvote"},
            headers=voter,
        )

        assert response.status_code == 404

    def test_unknown_vote_type_is_bad_request(self, client):
        _, asker = register(client, "asker")
        _, voter = register(client, "voter")
        question_id = ask(client, asker)

        response = client.post(
            "/votes",
            json={"target": question_id, "targetType": "question", "voteType": "meh"},
            headers=voter,
        )

        assert response.status_code == 400

    def test_retract_without_vote_is_not_found(self, client):
        _, asker = register(client, "asker")
        _, voter = register(client, "voter")
        question_id = ask(client, asker)

        response = client.delete(f"/votes/question/{question_id}", headers=voter)

        assert response.status_code == 404

    def test_stats_for_missing_target_is_not_found(self, client):
        response = client.get(f"/votes/answer/{uuid4()}")

        assert response.status_code == 404

    def test_unknown_target_type_in_path_is_bad_request(self, client):
        """A bad kind is 400 whether it arrives in the path or the body."""
        _, asker = register(client, "asker")
        _, voter = register(client, "voter")
        question_id = ask(client, asker)

        in_path = client.post(
            f"/votes/comment/{question_id}",
            json={"voteType": "upvote"},
            headers=voter,
        )
        in_body = client.post(
            "/votes",
            json={"target": question_id, "targetType": "comment", "voteType": "upvote"},
            headers=voter,
        )

        assert in_path.status_code == 400
        assert in_body.status_code == 400

    def test_malformed_target_id_is_bad_request(self, client):
        _, voter = register(client, "voter")

        in_body = client.post(
            "/votes",
            json={"target": "nope", "targetType": "question", "voteType": "upvote"},
            headers=voter,
        )
        in_path = client.get("/votes/question/nope")

        assert in_body.status_code == 400
        assert in_path.status_code == 400
        assert isinstance(in_body.json()["detail"], list)


def test_vote_event_published_after_request():
    """The score change reaches listeners once the vote request completes."""
    with TestClient(create_app(build_test_container())) as client:
        _, asker = register(client, "asker")
        _, voter = register(client, "voter")
        question_id = ask(client, asker)

        client.post(
            f"/votes/question/{question_id}", json={"voteType": "upvote"}, headers=voter
        )

        recorder = recorded_events(client)
        assert recorder.events == [
            (
                "vote_updated",
                {
                    "targetId": question_id,
                    "targetType": "question",
                    "voteScore": 1,
                    "action": "created",
                },
            )
        ]
        assert recorder.recipients == [None]
