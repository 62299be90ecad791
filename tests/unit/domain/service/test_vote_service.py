"""Unit tests for VoteService."""

from uuid import UUID, uuid4

import pytest

from qna.domain.error import NotFoundError
from qna.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
    VotableRepository,
    VoteRepository,
)
from qna.domain.service import (
    Broadcaster,
    EventOutbox,
    NullBroadcaster,
    UserService,
    VoteLedger,
    VoteService,
)
from qna.domain.value import TargetKind, UserId, VoteDirection, VoteTransition
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class ExplodingBroadcaster(Broadcaster):
    """Broadcaster whose transport is down."""

    async def publish(
        self, topic: str, payload: dict, user_id: UUID | None = None
    ) -> None:
        raise ConnectionError("socket hub unavailable")


async def _seed(env, author_reputation: int = 100):
    user_repo = await env.get(UserRepository)
    question_repo = await env.get(QuestionRepository)
    answer_repo = await env.get(AnswerRepository)
    asker = await user_repo.save(make_user("asker", reputation=author_reputation))
    answerer = await user_repo.save(
        make_user("answerer", reputation=author_reputation)
    )
    voter = await user_repo.save(make_user("voter"))
    question = await question_repo.save(make_question(asker.id))
    answer = await answer_repo.save(make_answer(question.id, answerer.id))
    return asker, answerer, voter, question, answer


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_question_vote_sequence(self, unit_env):
        """Up, down, down again on a question moves reputation 100, 105, 98, 100."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, _, voter, question, _ = await _seed(unit_env)

        # Act
        up = await vote_service.cast_vote(voter.id, question.id, "question", "upvote")
        down = await vote_service.cast_vote(
            voter.id, question.id, "question", "downvote"
        )
        toggled = await vote_service.cast_vote(
            voter.id, question.id, "question", "downvote"
        )

        # Assert
        assert (up.action, up.new_reputation, up.vote_score) == (
            VoteTransition.CREATED,
            105,
            1,
        )
        assert (down.action, down.new_reputation, down.vote_score) == (
            VoteTransition.UPDATED,
            98,
            -1,
        )
        assert (toggled.action, toggled.new_reputation, toggled.vote_score) == (
            VoteTransition.REMOVED,
            100,
            0,
        )
        assert toggled.vote is None

    @pytest.mark.asyncio
    async def test_answer_vote_sequence(self, unit_env):
        """Up, down, down again on an answer moves reputation 100, 110, 98, 100."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        _, _, voter, _, answer = await _seed(unit_env)

        # Act
        results = [
            await vote_service.cast_vote(voter.id, answer.id, "answer", direction)
            for direction in ("upvote", "downvote", "downvote")
        ]

        # Assert
        assert [r.new_reputation for r in results] == [110, 98, 100]
        assert [r.vote_score for r in results] == [1, -1, 0]
        stored = await answer_repo.find_by_id(answer.id)
        assert stored.vote_score == 0

    @pytest.mark.asyncio
    async def test_reputation_never_goes_negative(self, unit_env):
        """A downvote on a zero-reputation author should floor at zero."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, _, voter, question, _ = await _seed(unit_env, author_reputation=0)

        # Act
        result = await vote_service.cast_vote(
            voter.id, question.id, "question", "downvote"
        )

        # Assert
        assert result.new_reputation == 0
        assert result.vote_score == -1

    @pytest.mark.asyncio
    async def test_publishes_vote_updated_event(self, unit_env):
        """An applied vote is announced once the outbox is flushed."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        broadcaster = await unit_env.get(Broadcaster)
        outbox = await unit_env.get(EventOutbox)
        _, _, voter, question, _ = await _seed(unit_env)

        # Act
        await vote_service.cast_vote(voter.id, question.id, "question", "upvote")

        # Assert
        assert broadcaster.events == []
        assert outbox.pending == 1

        await outbox.flush()
        assert broadcaster.events == [
            (
                "vote_updated",
                {
                    "targetId": str(question.id),
                    "targetType": "question",
                    "voteScore": 1,
                    "action": "created",
                },
            )
        ]

    @pytest.mark.asyncio
    async def test_broadcast_failure_does_not_fail_vote(self, unit_env):
        """A broken transport should not undo or fail the vote."""
        # Arrange
        vote_service = VoteService(
            vote_ledger=await unit_env.get(VoteLedger),
            vote_repository=await unit_env.get(VoteRepository),
            targets=await unit_env.get(dict[TargetKind, VotableRepository]),
            user_service=await unit_env.get(UserService),
            broadcaster=ExplodingBroadcaster(),
        )
        vote_repo = await unit_env.get(VoteRepository)
        _, _, voter, question, _ = await _seed(unit_env)

        # Act
        result = await vote_service.cast_vote(
            voter.id, question.id, "question", "upvote"
        )

        # Assert
        assert result.action == VoteTransition.CREATED
        assert result.new_reputation == 105
        assert await vote_repo.count_by_voter(voter.id) == 1


class TestRemoveVote:
    """Tests for remove_vote."""

    @pytest.mark.asyncio
    async def test_remove_restores_score_and_reputation(self, unit_env):
        """Removing an upvote should undo exactly what it applied."""
        vote_service = await unit_env.get(VoteService)
        _, _, voter, _, answer = await _seed(unit_env)
        await vote_service.cast_vote(voter.id, answer.id, "answer", "upvote")

        result = await vote_service.remove_vote(voter.id, answer.id, "answer")

        assert result.action == VoteTransition.REMOVED
        assert result.vote_score == 0
        assert result.new_reputation == 100

    @pytest.mark.asyncio
    async def test_remove_missing_vote_raises_not_found(self, unit_env):
        """Removing a vote that doesn't exist should raise NotFoundError."""
        vote_service = await unit_env.get(VoteService)
        _, _, voter, question, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await vote_service.remove_vote(voter.id, question.id, "question")


class TestVoteQueries:
    """Tests for vote read operations."""

    @pytest.mark.asyncio
    async def test_vote_stats_count_each_direction(self, unit_env):
        """Stats should count up and down votes separately."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        _, _, voter, question, _ = await _seed(unit_env)
        other = await user_repo.save(make_user("other"))
        third = await user_repo.save(make_user("third"))
        await vote_service.cast_vote(voter.id, question.id, "question", "upvote")
        await vote_service.cast_vote(other.id, question.id, "question", "upvote")
        await vote_service.cast_vote(third.id, question.id, "question", "downvote")

        # Act
        tally = await vote_service.get_vote_stats(question.id, "question")

        # Assert
        assert tally.upvotes == 2
        assert tally.downvotes == 1
        assert tally.total == 1

    @pytest.mark.asyncio
    async def test_vote_stats_for_missing_target(self, unit_env):
        """Stats on a missing target should raise NotFoundError."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.get_vote_stats(uuid4(), TargetKind.QUESTION)

    @pytest.mark.asyncio
    async def test_get_user_vote(self, unit_env):
        """Should return the caller's vote, or None before voting."""
        vote_service = await unit_env.get(VoteService)
        _, _, voter, question, _ = await _seed(unit_env)

        assert (
            await vote_service.get_user_vote(
                voter.id, question.id, TargetKind.QUESTION
            )
            is None
        )
        await vote_service.cast_vote(voter.id, question.id, "question", "downvote")
        vote = await vote_service.get_user_vote(
            voter.id, question.id, TargetKind.QUESTION
        )
        assert vote.direction == VoteDirection.DOWN

    @pytest.mark.asyncio
    async def test_list_user_votes_pages(self, unit_env):
        """Listing should page through a user's votes with a total."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, _, voter, question, answer = await _seed(unit_env)
        await vote_service.cast_vote(voter.id, question.id, "question", "upvote")
        await vote_service.cast_vote(voter.id, answer.id, "answer", "upvote")

        # Act
        first_page, total = await vote_service.list_user_votes(
            voter.id, limit=1, offset=0
        )
        empty, _ = await vote_service.list_user_votes(
            UserId(uuid4()), limit=10, offset=0
        )

        # Assert
        assert total == 2
        assert len(first_page) == 1
        assert empty == []


class TestNullBroadcaster:
    """Votes work when nothing is listening."""

    @pytest.mark.asyncio
    async def test_vote_with_null_broadcaster(self, unit_env):
        vote_service = VoteService(
            vote_ledger=await unit_env.get(VoteLedger),
            vote_repository=await unit_env.get(VoteRepository),
            targets=await unit_env.get(dict[TargetKind, VotableRepository]),
            user_service=await unit_env.get(UserService),
            broadcaster=NullBroadcaster(),
        )
        _, _, voter, question, _ = await _seed(unit_env)

        result = await vote_service.cast_vote(
            voter.id, question.id, "question", "upvote"
        )

        assert result.vote_score == 1
