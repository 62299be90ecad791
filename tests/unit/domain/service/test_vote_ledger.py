"""Unit tests for VoteLedger."""

from uuid import uuid4

import pytest

from qna.config import ReputationSettings
from qna.domain.error import ConflictError, InvalidArgumentError, NotFoundError
from qna.domain.model import Vote
from qna.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from qna.domain.service import ReputationTable, VoteLedger
from qna.domain.value import TargetKind, UserId, VoteDirection, VoteId, VoteTransition
from qna.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class RacingVoteRepository(InMemoryVoteRepository):
    """Simulates another request inserting the same vote between read and write."""

    def __init__(self, competing: VoteDirection) -> None:
        super().__init__()
        self.competing = competing
        self.save_calls = 0

    async def save(self, vote: Vote) -> Vote:
        self.save_calls += 1
        if self.save_calls == 1:
            await super().save(
                vote.model_copy(
                    update={"id": VoteId(uuid4()), "direction": self.competing}
                )
            )
        return await super().save(vote)


class AlwaysConflictingVoteRepository(InMemoryVoteRepository):
    """Every insert collides."""

    def __init__(self) -> None:
        super().__init__()
        self.save_calls = 0

    async def save(self, vote: Vote) -> Vote:
        self.save_calls += 1
        raise ConflictError("vote", str(vote.id))


async def _question_fixture(env):
    user_repo = await env.get(UserRepository)
    question_repo = await env.get(QuestionRepository)
    author = await user_repo.save(make_user("asker"))
    voter = await user_repo.save(make_user("voter"))
    question = await question_repo.save(make_question(author.id))
    return author, voter, question


async def _ledger_with(env, vote_repository: VoteRepository) -> VoteLedger:
    return VoteLedger(
        vote_repository=vote_repository,
        targets={
            TargetKind.QUESTION: await env.get(QuestionRepository),
            TargetKind.ANSWER: await env.get(AnswerRepository),
        },
        reputation=ReputationTable(ReputationSettings()),
    )


class TestSubmitVote:
    """Tests for submit_vote transitions."""

    @pytest.mark.asyncio
    async def test_first_upvote_creates_vote(self, unit_env):
        """First vote on a target should create it and award the author."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        author, voter, question = await _question_fixture(unit_env)

        # Act
        outcome = await ledger.submit_vote(
            voter.id, question.id, TargetKind.QUESTION, VoteDirection.UP
        )

        # Assert
        assert outcome.transition == VoteTransition.CREATED
        assert outcome.score_delta == 1
        assert outcome.reputation_delta == 5
        assert outcome.previous_direction is None
        assert outcome.target.author_id == author.id

        stored = await vote_repo.find_by_voter_and_target(
            voter.id, TargetKind.QUESTION, question.id
        )
        assert stored is not None
        assert stored.direction == VoteDirection.UP
        assert outcome.vote == stored

    @pytest.mark.asyncio
    async def test_same_direction_twice_removes_vote(self, unit_env):
        """Repeating a vote should toggle it off and reverse its deltas."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        _, voter, question = await _question_fixture(unit_env)
        await ledger.submit_vote(voter.id, question.id, "question", "upvote")

        # Act
        outcome = await ledger.submit_vote(voter.id, question.id, "question", "upvote")

        # Assert
        assert outcome.transition == VoteTransition.REMOVED
        assert outcome.vote is None
        assert outcome.direction == VoteDirection.UP
        assert outcome.score_delta == -1
        assert outcome.reputation_delta == -5
        assert (
            await vote_repo.find_by_voter_and_target(
                voter.id, TargetKind.QUESTION, question.id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_opposite_direction_flips_vote(self, unit_env):
        """Voting the other way should update in place with a net swing of 2."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        _, voter, question = await _question_fixture(unit_env)
        created = await ledger.submit_vote(
            voter.id, question.id, "question", "upvote"
        )

        # Act
        outcome = await ledger.submit_vote(
            voter.id, question.id, "question", "downvote"
        )

        # Assert
        assert outcome.transition == VoteTransition.UPDATED
        assert outcome.previous_direction == VoteDirection.UP
        assert outcome.score_delta == -2
        assert outcome.reputation_delta == -7
        assert outcome.vote.id == created.vote.id
        assert await vote_repo.count_by_voter(voter.id) == 1

    @pytest.mark.asyncio
    async def test_answer_flip_uses_answer_awards(self, unit_env):
        """Flipping a downvote on an answer should pay the answer table."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        user_repo = await unit_env.get(UserRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author, voter, question = await _question_fixture(unit_env)
        answerer = await user_repo.save(make_user("answerer"))
        answer = await answer_repo.save(make_answer(question.id, answerer.id))
        await ledger.submit_vote(voter.id, answer.id, "answer", "downvote")

        # Act
        outcome = await ledger.submit_vote(voter.id, answer.id, "answer", "upvote")

        # Assert
        assert outcome.transition == VoteTransition.UPDATED
        assert outcome.score_delta == 2
        assert outcome.reputation_delta == 12
        assert outcome.target.author_id == answerer.id

    @pytest.mark.asyncio
    async def test_self_vote_rejected(self, unit_env):
        """Voting on your own question should fail without storing a vote."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        author, _, question = await _question_fixture(unit_env)

        # Act & Assert
        with pytest.raises(InvalidArgumentError, match="own content"):
            await ledger.submit_vote(author.id, question.id, "question", "upvote")
        assert await vote_repo.count_by_voter(author.id) == 0

    @pytest.mark.asyncio
    async def test_missing_target_raises_not_found(self, unit_env):
        """Voting on a target that doesn't exist should raise NotFoundError."""
        ledger = await unit_env.get(VoteLedger)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await ledger.submit_vote(UserId(uuid4()), uuid4(), "answer", "upvote")

    @pytest.mark.asyncio
    async def test_question_id_is_not_an_answer(self, unit_env):
        """A target must exist under the requested kind."""
        ledger = await unit_env.get(VoteLedger)
        _, voter, question = await _question_fixture(unit_env)

        with pytest.raises(NotFoundError):
            await ledger.submit_vote(voter.id, question.id, "answer", "upvote")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kind,direction",
        [("comment", "upvote"), ("question", "sideways"), ("question", "UP")],
    )
    async def test_unknown_kind_or_direction_rejected(
        self, unit_env, kind, direction
    ):
        """Values outside the enums should be rejected up front."""
        ledger = await unit_env.get(VoteLedger)
        _, voter, question = await _question_fixture(unit_env)

        with pytest.raises(InvalidArgumentError):
            await ledger.submit_vote(voter.id, question.id, kind, direction)


class TestConflictRetry:
    """Tests for the bounded retry on duplicate-key conflicts."""

    @pytest.mark.asyncio
    async def test_conflict_is_retried_against_fresh_state(self, unit_env):
        """A racing insert should be re-read and the decision redone."""
        # Arrange
        racing_repo = RacingVoteRepository(competing=VoteDirection.DOWN)
        ledger = await _ledger_with(unit_env, racing_repo)
        _, voter, question = await _question_fixture(unit_env)

        # Act
        outcome = await ledger.submit_vote(voter.id, question.id, "question", "upvote")

        # Assert - the retry saw the competing downvote and flipped it
        assert racing_repo.save_calls == 1
        assert outcome.transition == VoteTransition.UPDATED
        assert outcome.previous_direction == VoteDirection.DOWN
        assert outcome.score_delta == 2
        tally = await racing_repo.tally(TargetKind.QUESTION, question.id)
        assert (tally.upvotes, tally.downvotes) == (1, 0)

    @pytest.mark.asyncio
    async def test_second_conflict_propagates(self, unit_env):
        """A conflict that survives the retry should surface to the caller."""
        # Arrange
        conflicting_repo = AlwaysConflictingVoteRepository()
        ledger = await _ledger_with(unit_env, conflicting_repo)
        _, voter, question = await _question_fixture(unit_env)

        # Act & Assert
        with pytest.raises(ConflictError):
            await ledger.submit_vote(voter.id, question.id, "question", "upvote")
        assert conflicting_repo.save_calls == 2


class TestRetractVote:
    """Tests for retract_vote."""

    @pytest.mark.asyncio
    async def test_retract_reverses_downvote(self, unit_env):
        """Retracting a downvote should give back the score and reputation."""
        ledger = await unit_env.get(VoteLedger)
        _, voter, question = await _question_fixture(unit_env)
        await ledger.submit_vote(voter.id, question.id, "question", "downvote")

        outcome = await ledger.retract_vote(voter.id, question.id, "question")

        assert outcome.transition == VoteTransition.REMOVED
        assert outcome.score_delta == 1
        assert outcome.reputation_delta == 2

    @pytest.mark.asyncio
    async def test_retract_without_vote_raises_not_found(self, unit_env):
        """Retracting a vote that was never cast should raise NotFoundError."""
        ledger = await unit_env.get(VoteLedger)
        _, voter, question = await _question_fixture(unit_env)

        with pytest.raises(NotFoundError, match="Vote not found"):
            await ledger.retract_vote(voter.id, question.id, "question")


class TestReplayConsistency:
    """Reported deltas should add up to the stored state."""

    @pytest.mark.asyncio
    async def test_summed_score_deltas_match_tally(self, unit_env):
        """Replaying every score delta from zero should equal ups minus downs."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        user_repo = await unit_env.get(UserRepository)
        _, _, question = await _question_fixture(unit_env)
        voters = [await user_repo.save(make_user(f"voter_{i}")) for i in range(3)]
        sequence = [
            (0, "upvote"),
            (1, "downvote"),
            (0, "downvote"),
            (2, "upvote"),
            (1, "downvote"),
            (2, "downvote"),
            (0, "downvote"),
            (1, "upvote"),
        ]

        # Act
        total_score = 0
        for index, direction in sequence:
            outcome = await ledger.submit_vote(
                voters[index].id, question.id, "question", direction
            )
            total_score += outcome.score_delta

        # Assert
        tally = await vote_repo.tally(TargetKind.QUESTION, question.id)
        assert total_score == tally.total
