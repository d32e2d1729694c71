"""Domain value objects for voteable."""

from voteable.domain.value.identifiers import (
    CommentId,
    GuestId,
    PostId,
    TagId,
    UserId,
    VoteRecordId,
)
from voteable.domain.value.types import (
    CounterDelta,
    Disposition,
    EntityRef,
    Handle,
    TagName,
)

__all__ = [
    # Identifiers
    "UserId",
    "GuestId",
    "PostId",
    "CommentId",
    "TagId",
    "VoteRecordId",
    # Types
    "Disposition",
    "EntityRef",
    "CounterDelta",
    "Handle",
    "TagName",
]
