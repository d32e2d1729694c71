"""Vote record entity.

A vote record is the durable statement of one voter's current disposition
toward one voteable. It is the sole source of truth for "who voted what";
the counters on voters and voteables are denormalized from it.
"""

from datetime import datetime

from pydantic import Field

from voteable.domain.model.common import DomainModel
from voteable.domain.value import Disposition, EntityRef, VoteRecordId


class VoteRecord(DomainModel):
    """Vote record entity.

    Business rules:
    - One record per (voter, voteable) pair (enforced by database unique constraint)
    - A differing vote changes the disposition in place instead of stacking
    - Polymorphic references to both voter and voteable
    """

    id: VoteRecordId
    voter: EntityRef
    voteable: EntityRef
    disposition: Disposition
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
