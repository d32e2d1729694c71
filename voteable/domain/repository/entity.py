"""Entity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from voteable.domain.model.entity import Entity
from voteable.domain.value import CounterDelta, EntityRef


class EntityRepository(ABC):
    """Repository for voters, voteables and other registered entities.

    Entities are addressed by polymorphic reference and resolved through the
    entity kind registry.
    """

    @abstractmethod
    async def find_by_ref(self, ref: EntityRef) -> Optional[Entity]:
        """Find an entity by reference.

        Args:
            ref: The entity's (kind, id) reference

        Returns:
            The entity if found, None otherwise

        Raises:
            NotFoundError: If the kind is not registered
        """
        pass

    @abstractmethod
    async def save(self, entity: Entity) -> Entity:
        """Save an entity (create or update).

        Args:
            entity: The entity to save

        Returns:
            The saved entity
        """
        pass

    @abstractmethod
    async def apply_vote_delta(self, ref: EntityRef, delta: CounterDelta) -> None:
        """Atomically add ``delta`` to the entity's vote counters.

        Implementations must increment in the store, not read-modify-write,
        so concurrent votes on the same entity do not lose updates.

        Args:
            ref: The entity's reference
            delta: Signed change per counter
        """
        pass
