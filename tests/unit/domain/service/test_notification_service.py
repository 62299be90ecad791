"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from qna.domain.error import NotFoundError
from qna.domain.repository import UserRepository
from qna.domain.service import Broadcaster, EventOutbox, NotificationService
from qna.domain.value import NotificationId, NotificationType, QuestionId, UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _seed(env):
    user_repo = await env.get(UserRepository)
    alice = await user_repo.save(make_user("alice"))
    bob = await user_repo.save(make_user("bob"))
    return alice, bob


async def _notify(service, recipient, sender):
    return await service.notify(
        recipient.id,
        sender.id,
        NotificationType.NEW_ANSWER,
        question_id=QuestionId(uuid4()),
    )


class TestNotify:
    """Tests for notify."""

    @pytest.mark.asyncio
    async def test_notify_stores_message(self, unit_env):
        service = await unit_env.get(NotificationService)
        alice, bob = await _seed(unit_env)

        notification = await _notify(service, alice, bob)

        assert notification.recipient_id == alice.id
        assert notification.message == "bob answered your question"
        assert notification.is_read is False

    @pytest.mark.asyncio
    async def test_notify_self_is_skipped(self, unit_env):
        service = await unit_env.get(NotificationService)
        alice, _ = await _seed(unit_env)

        assert await _notify(service, alice, alice) is None
        assert await service.unread_count(alice.id) == 0

    @pytest.mark.asyncio
    async def test_notify_unknown_sender(self, unit_env):
        service = await unit_env.get(NotificationService)
        alice, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await service.notify(
                alice.id, UserId(uuid4()), NotificationType.ANSWER_ACCEPTED
            )

    @pytest.mark.asyncio
    async def test_notify_publishes_to_recipient_after_flush(self, unit_env):
        """The event is addressed to the recipient and held until commit."""
        service = await unit_env.get(NotificationService)
        broadcaster = await unit_env.get(Broadcaster)
        outbox = await unit_env.get(EventOutbox)
        alice, bob = await _seed(unit_env)

        notification = await _notify(service, alice, bob)
        assert broadcaster.events == []

        await outbox.flush()
        [(topic, payload)] = broadcaster.events
        assert topic == "notification"
        assert payload["id"] == str(notification.id)
        assert payload["type"] == "new_answer"
        assert payload["senderId"] == str(bob.id)
        assert broadcaster.recipients == [alice.id]


class TestReadState:
    """Tests for listing and marking notifications."""

    @pytest.mark.asyncio
    async def test_list_unread_only(self, unit_env):
        service = await unit_env.get(NotificationService)
        alice, bob = await _seed(unit_env)
        first = await _notify(service, alice, bob)
        await _notify(service, alice, bob)

        await service.mark_read(first.id, alice.id)

        unread, total = await service.list_for_user(alice.id, unread_only=True)
        assert total == 1
        assert unread[0].id != first.id
        assert await service.unread_count(alice.id) == 1

    @pytest.mark.asyncio
    async def test_mark_all_read(self, unit_env):
        service = await unit_env.get(NotificationService)
        alice, bob = await _seed(unit_env)
        await _notify(service, alice, bob)
        await _notify(service, alice, bob)

        assert await service.mark_all_read(alice.id) == 2
        assert await service.mark_all_read(alice.id) == 0
        assert await service.unread_count(alice.id) == 0

    @pytest.mark.asyncio
    async def test_cannot_touch_another_users_notification(self, unit_env):
        """Notifications are scoped to their recipient."""
        service = await unit_env.get(NotificationService)
        alice, bob = await _seed(unit_env)
        notification = await _notify(service, alice, bob)

        with pytest.raises(NotFoundError):
            await service.mark_read(notification.id, bob.id)
        with pytest.raises(NotFoundError):
            await service.delete(notification.id, bob.id)

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        service = await unit_env.get(NotificationService)
        alice, bob = await _seed(unit_env)
        notification = await _notify(service, alice, bob)

        await service.delete(notification.id, alice.id)

        _, total = await service.list_for_user(alice.id)
        assert total == 0
        with pytest.raises(NotFoundError):
            await service.delete(NotificationId(uuid4()), alice.id)
