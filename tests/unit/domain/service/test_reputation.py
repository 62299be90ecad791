"""Unit tests for the reputation table."""

import pytest

from qna.config import ReputationSettings
from qna.domain.service import ReputationTable
from qna.domain.value import TargetKind, VoteDirection, VoteTransition


@pytest.fixture
def table():
    return ReputationTable(ReputationSettings())


class TestReputationTable:
    """Tests for award lookups and transition deltas."""

    @pytest.mark.parametrize(
        "kind,direction,points",
        [
            (TargetKind.QUESTION, VoteDirection.UP, 5),
            (TargetKind.QUESTION, VoteDirection.DOWN, -2),
            (TargetKind.ANSWER, VoteDirection.UP, 10),
            (TargetKind.ANSWER, VoteDirection.DOWN, -2),
        ],
    )
    def test_default_awards(self, table, kind, direction, points):
        assert table.award(kind, direction) == points

    def test_removal_negates_creation(self, table):
        created = table.vote_delta(
            VoteTransition.CREATED, TargetKind.ANSWER, VoteDirection.DOWN
        )
        removed = table.vote_delta(
            VoteTransition.REMOVED, TargetKind.ANSWER, VoteDirection.DOWN
        )
        assert created + removed == 0

    def test_flip_is_difference_of_awards(self, table):
        delta = table.vote_delta(
            VoteTransition.UPDATED,
            TargetKind.QUESTION,
            VoteDirection.DOWN,
            previous=VoteDirection.UP,
        )
        assert delta == -7

    def test_flip_requires_previous_direction(self, table):
        with pytest.raises(ValueError):
            table.vote_delta(
                VoteTransition.UPDATED, TargetKind.QUESTION, VoteDirection.UP
            )

    def test_values_come_from_settings(self):
        """Overridden settings should change the awards."""
        table = ReputationTable(
            ReputationSettings(answer_upvote=15, answer_accepted=25)
        )
        assert table.award(TargetKind.ANSWER, VoteDirection.UP) == 15
        assert table.answer_accepted == 25
