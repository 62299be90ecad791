"""User aggregate root.

Users ask and answer questions and accumulate reputation when others
vote on their content.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import UserId
from qna.domain.value.types import Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    email: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    reputation: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
