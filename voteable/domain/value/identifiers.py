"""Strongly typed identifiers for voteable domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Voters
UserId = NewType("UserId", UUID)
GuestId = NewType("GuestId", UUID)

# Voteables
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)

# Neither
TagId = NewType("TagId", UUID)

VoteRecordId = NewType("VoteRecordId", UUID)
