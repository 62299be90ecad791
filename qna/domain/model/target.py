"""Votable target snapshot."""

from uuid import UUID

from qna.domain.model.common import DomainModel
from qna.domain.value import TargetKind, UserId


class Target(DomainModel):
    """The part of a question or answer the vote ledger needs.

    Repositories for votable entities return this shape so vote logic never
    branches on the concrete entity type.
    """

    id: UUID
    kind: TargetKind
    author_id: UserId
    vote_score: int
