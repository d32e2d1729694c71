"""Helpers shared by the vote use cases."""

from uuid import UUID

from pydantic import BaseModel

from voteable.domain.error import NotFoundError, ValidationError
from voteable.domain.model import Entity, VoteCounters, Voter, entity_type
from voteable.domain.repository import EntityRepository
from voteable.domain.value import EntityRef


class VoteCountersResponse(BaseModel):
    """Vote counters of one entity."""

    up_votes: int
    down_votes: int
    abstain_votes: int
    total_votes: int

    @classmethod
    def from_entity(cls, entity: VoteCounters) -> "VoteCountersResponse":
        return cls(
            up_votes=entity.up_votes,
            down_votes=entity.down_votes,
            abstain_votes=entity.abstain_votes,
            total_votes=entity.total_votes,
        )


async def resolve_entity(
    entity_repository: EntityRepository, kind: str, entity_id: str
) -> Entity:
    """Load the entity behind a (kind, id) pair.

    Raises:
        NotFoundError: If the kind is unknown or the entity does not exist
        ValueError: If ``entity_id`` is not a UUID
    """
    entity_type(kind)
    ref = EntityRef(kind=kind, id=UUID(entity_id))
    entity = await entity_repository.find_by_ref(ref)
    if entity is None:
        raise NotFoundError(kind.capitalize(), entity_id)
    return entity


async def resolve_voter(
    entity_repository: EntityRepository, kind: str, entity_id: str
) -> Voter:
    """Load a voter, rejecting entity kinds that cannot vote.

    Raises:
        NotFoundError: If the kind is unknown or the entity does not exist
        ValidationError: If the entity kind cannot cast votes
    """
    entity = await resolve_entity(entity_repository, kind, entity_id)
    if not entity.is_voter():
        raise ValidationError(f"Entity kind '{kind}' cannot vote")
    return entity  # type: ignore[return-value]
