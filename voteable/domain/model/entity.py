"""Entity base class and voting capability markers.

Capabilities are declared statically by inheriting a marker mixin, so a
type checker can verify that an entity type was registered correctly:

    class Post(Entity, Voteable):
        kind: ClassVar[str] = "post"

    class User(Entity, Voter, TracksVoteCounters):
        kind: ClassVar[str] = "user"
"""

from typing import ClassVar
from uuid import UUID

from voteable.domain.model.common import DomainModel
from voteable.domain.value import EntityRef


class Entity(DomainModel):
    """Base class for all persisted entities that can take part in voting.

    ``kind`` is the type discriminator stored in polymorphic references.
    """

    kind: ClassVar[str]

    id: UUID

    def ref(self) -> EntityRef:
        """Return the polymorphic (kind, id) reference to this entity."""
        return EntityRef(kind=self.kind, id=self.id)

    @classmethod
    def is_voteable(cls) -> bool:
        return issubclass(cls, Voteable)

    @classmethod
    def is_voter(cls) -> bool:
        return issubclass(cls, Voter)

    @classmethod
    def tracks_vote_counters(cls) -> bool:
        return issubclass(cls, TracksVoteCounters)


class VoteCounters(DomainModel):
    """Denormalized up/down/abstain counters."""

    up_votes: int = 0
    down_votes: int = 0
    abstain_votes: int = 0

    @property
    def total_votes(self) -> int:
        return self.up_votes + self.down_votes + self.abstain_votes


class Voteable(VoteCounters):
    """Marks an entity type as able to receive votes.

    Voteables always carry the three counters.
    """


class Voter(DomainModel):
    """Marks an entity type as able to cast votes."""


class TracksVoteCounters(VoteCounters):
    """Opt-in for voters that keep aggregate counters of their own votes."""
