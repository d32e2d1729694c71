"""User entity.

Users are registered voters and keep a tally of the votes they cast.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from voteable.domain.model.entity import Entity, TracksVoteCounters, Voter
from voteable.domain.value import Handle, UserId


class User(Entity, Voter, TracksVoteCounters):
    """Registered voter with mirrored vote counters."""

    kind: ClassVar[str] = "user"

    id: UserId
    handle: Handle
    created_at: datetime = Field(default_factory=datetime.now)
