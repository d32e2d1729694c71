"""Guest entity."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from voteable.domain.model.entity import Entity, Voter
from voteable.domain.value import GuestId


class Guest(Entity, Voter):
    """Anonymous voter.

    Guests can vote but do not track aggregate counters; the voting
    protocol skips their side of the bookkeeping.
    """

    kind: ClassVar[str] = "guest"

    id: GuestId
    display_name: Optional[str] = Field(default=None, max_length=100)
    created_at: datetime = Field(default_factory=datetime.now)
