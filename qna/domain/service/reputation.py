"""Reputation point table."""

from qna.config import ReputationSettings
from qna.domain.value import TargetKind, VoteDirection, VoteTransition


class ReputationTable:
    """Fixed reputation awards keyed by (target kind, vote direction).

    Built once from settings so every caller reads the same numbers.
    """

    def __init__(self, settings: ReputationSettings) -> None:
        """Initialize the table.

        Args:
            settings: Reputation settings holding the point values
        """
        self._votes: dict[tuple[TargetKind, VoteDirection], int] = {
            (TargetKind.QUESTION, VoteDirection.UP): settings.question_upvote,
            (TargetKind.QUESTION, VoteDirection.DOWN): settings.question_downvote,
            (TargetKind.ANSWER, VoteDirection.UP): settings.answer_upvote,
            (TargetKind.ANSWER, VoteDirection.DOWN): settings.answer_downvote,
        }
        self.answer_accepted = settings.answer_accepted
        self.accept_answer = settings.accept_answer

    def award(self, kind: TargetKind, direction: VoteDirection) -> int:
        """Points paid to the author when a vote of ``direction`` is created."""
        return self._votes[(kind, direction)]

    def vote_delta(
        self,
        transition: VoteTransition,
        kind: TargetKind,
        direction: VoteDirection,
        previous: VoteDirection | None = None,
    ) -> int:
        """Reputation delta for the author after a vote transition.

        Args:
            transition: What happened to the vote row
            kind: Kind of target that was voted on
            direction: Direction of the vote after the transition, or the
                direction of the removed vote for ``removed``
            previous: Direction before the transition (``updated`` only)

        Returns:
            Signed reputation delta
        """
        if transition is VoteTransition.CREATED:
            return self.award(kind, direction)
        if transition is VoteTransition.REMOVED:
            return -self.award(kind, direction)
        if previous is None:
            raise ValueError("Updated transition requires the previous direction")
        return self.award(kind, direction) - self.award(kind, previous)
