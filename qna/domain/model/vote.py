"""Vote entity.

Votes are the unit of community curation on questions and answers.
Each user holds at most one vote per target.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import TargetKind, UserId, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (voter, target, target kind), enforced by a database
      unique constraint
    - Voters cannot vote on content they authored
    - Polymorphic reference to the target (question or answer)
    """

    id: VoteId
    voter_id: UserId
    target_kind: TargetKind
    target_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
