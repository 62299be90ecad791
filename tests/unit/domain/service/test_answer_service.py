"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from qna.domain.error import InvalidArgumentError, NotAuthorizedError, NotFoundError
from qna.domain.repository import (
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from qna.domain.service import AnswerService
from qna.domain.value import AnswerId, NotificationType, QuestionId
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _seed(env):
    user_repo = await env.get(UserRepository)
    question_repo = await env.get(QuestionRepository)
    asker = await user_repo.save(make_user("asker"))
    alice = await user_repo.save(make_user("alice"))
    bob = await user_repo.save(make_user("bob"))
    question = await question_repo.save(make_question(asker.id))
    return asker, alice, bob, question


async def _reputation(env, user) -> int:
    user_repo = await env.get(UserRepository)
    return (await user_repo.find_by_id(user.id)).reputation


class TestPostAnswer:
    """Tests for post_answer."""

    @pytest.mark.asyncio
    async def test_post_answer_increments_answer_count(self, unit_env):
        """Answering should bump the question's answer count."""
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        _, alice, _, question = await _seed(unit_env)

        answer = await answer_service.post_answer(question.id, alice.id, "Use await.")

        assert answer.question_id == question.id
        assert answer.is_accepted is False
        stored = await question_repo.find_by_id(question.id)
        assert stored.answer_count == 1

    @pytest.mark.asyncio
    async def test_post_answer_to_missing_question(self, unit_env):
        """Answering a missing question should raise NotFoundError."""
        answer_service = await unit_env.get(AnswerService)
        _, alice, _, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await answer_service.post_answer(QuestionId(uuid4()), alice.id, "Hi")


class TestAcceptAnswer:
    """Tests for accept and unaccept."""

    @pytest.mark.asyncio
    async def test_accept_awards_both_authors(self, unit_env):
        """Accepting should pay the answerer 15 and the asker 2."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        asker, alice, _, question = await _seed(unit_env)
        answer = await answer_service.post_answer(question.id, alice.id, "Use await.")

        # Act
        accepted = await answer_service.accept(answer.id, asker.id)

        # Assert
        assert accepted.is_accepted is True
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id == (
            answer.id
        )
        assert await _reputation(unit_env, alice) == 15
        assert await _reputation(unit_env, asker) == 2

    @pytest.mark.asyncio
    async def test_accepting_another_answer_moves_the_award(self, unit_env):
        """Only one answer stays accepted and only its author keeps the award."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        asker, alice, bob, question = await _seed(unit_env)
        first = await answer_service.post_answer(question.id, alice.id, "First.")
        second = await answer_service.post_answer(question.id, bob.id, "Second.")
        await answer_service.accept(first.id, asker.id)

        # Act
        await answer_service.accept(second.id, asker.id)

        # Assert
        assert (await answer_service.get_by_id(first.id)).is_accepted is False
        assert (await answer_service.get_by_id(second.id)).is_accepted is True
        assert await _reputation(unit_env, alice) == 0
        assert await _reputation(unit_env, bob) == 15
        assert await _reputation(unit_env, asker) == 2

    @pytest.mark.asyncio
    async def test_accepting_own_answer_earns_nothing(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        asker, _, _, question = await _seed(unit_env)
        answer = await answer_service.post_answer(question.id, asker.id, "Self.")

        accepted = await answer_service.accept(answer.id, asker.id)

        assert accepted.is_accepted is True
        assert await _reputation(unit_env, asker) == 0

    @pytest.mark.asyncio
    async def test_accept_twice_rejected(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        asker, alice, _, question = await _seed(unit_env)
        answer = await answer_service.post_answer(question.id, alice.id, "Once.")
        await answer_service.accept(answer.id, asker.id)

        with pytest.raises(InvalidArgumentError, match="already accepted"):
            await answer_service.accept(answer.id, asker.id)
        assert await _reputation(unit_env, alice) == 15

    @pytest.mark.asyncio
    async def test_only_question_author_can_accept(self, unit_env):
        """Anyone other than the asker should get NotAuthorizedError."""
        answer_service = await unit_env.get(AnswerService)
        _, alice, bob, question = await _seed(unit_env)
        answer = await answer_service.post_answer(question.id, alice.id, "Mine.")

        with pytest.raises(NotAuthorizedError):
            await answer_service.accept(answer.id, bob.id)

    @pytest.mark.asyncio
    async def test_unaccept_reverses_award(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        asker, alice, _, question = await _seed(unit_env)
        answer = await answer_service.post_answer(question.id, alice.id, "Undo.")
        await answer_service.accept(answer.id, asker.id)

        result = await answer_service.unaccept(answer.id, asker.id)

        assert result.is_accepted is False
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id is None
        assert await _reputation(unit_env, alice) == 0
        assert await _reputation(unit_env, asker) == 0

    @pytest.mark.asyncio
    async def test_unaccept_when_not_accepted(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        asker, alice, _, question = await _seed(unit_env)
        answer = await answer_service.post_answer(question.id, alice.id, "Nope.")

        with pytest.raises(InvalidArgumentError, match="not accepted"):
            await answer_service.unaccept(answer.id, asker.id)

    @pytest.mark.asyncio
    async def test_accept_missing_answer(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        asker, _, _, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await answer_service.accept(AnswerId(uuid4()), asker.id)


class TestAnswerNotifications:
    """Tests for the notifications answers and acceptance create."""

    @pytest.mark.asyncio
    async def test_answer_notifies_asker(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, alice, _, question = await _seed(unit_env)

        answer = await answer_service.post_answer(question.id, alice.id, "Use await.")

        [notification] = await notification_repo.find_by_recipient(asker.id)
        assert notification.type == NotificationType.NEW_ANSWER
        assert notification.sender_id == alice.id
        assert notification.question_id == question.id
        assert notification.answer_id == answer.id
        assert notification.message == "alice answered your question"

    @pytest.mark.asyncio
    async def test_accept_notifies_answerer(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, alice, _, question = await _seed(unit_env)
        answer = await answer_service.post_answer(question.id, alice.id, "Use await.")

        await answer_service.accept(answer.id, asker.id)

        [notification] = await notification_repo.find_by_recipient(alice.id)
        assert notification.type == NotificationType.ANSWER_ACCEPTED
        assert notification.sender_id == asker.id
        assert notification.answer_id == answer.id

    @pytest.mark.asyncio
    async def test_answering_own_question_notifies_nobody(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, _, _, question = await _seed(unit_env)

        answer = await answer_service.post_answer(question.id, asker.id, "Self.")
        await answer_service.accept(answer.id, asker.id)

        assert await notification_repo.count_by_recipient(asker.id) == 0
