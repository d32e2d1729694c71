"""In-memory entity repository for testing."""

from typing import Optional

import logfire

from voteable.domain.model import Entity, entity_type
from voteable.domain.repository.entity import EntityRepository
from voteable.domain.value import CounterDelta, EntityRef
from voteable.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryEntityRepository(EntityRepository):
    """In-memory implementation of EntityRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_ref(self, ref: EntityRef) -> Optional[Entity]:
        """Find an entity by reference."""
        entity_type(ref.kind)
        return self.database.entities.get(ref)

    async def save(self, entity: Entity) -> Entity:
        """Save an entity (create or update)."""
        self.database.entities[entity.ref()] = entity
        return entity

    async def apply_vote_delta(self, ref: EntityRef, delta: CounterDelta) -> None:
        """Add ``delta`` to the entity's vote counters."""
        if delta.is_zero:
            return

        entity = self.database.entities.get(ref)
        if entity is None:
            logfire.warn("Vote counters target missing", entity=str(ref))
            return

        self.database.entities[ref] = entity.model_copy(
            update={
                name: getattr(entity, name) + amount
                for name, amount in delta.model_dump().items()
            }
        )
