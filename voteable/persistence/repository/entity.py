"""PostgreSQL implementation of Entity repository."""

from typing import Optional

import logfire
from sqlalchemy import Table, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from voteable.domain.model import Entity, entity_type
from voteable.domain.repository import EntityRepository
from voteable.domain.value import CounterDelta, EntityRef
from voteable.persistence.mappers import entity_to_dict, row_to_entity
from voteable.persistence.tables import ENTITY_TABLES


class PostgresEntityRepository(EntityRepository):
    """PostgreSQL implementation of EntityRepository.

    Each entity kind lives in its own table; the kind registry resolves the
    table and the domain model for a reference.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_ref(self, ref: EntityRef) -> Optional[Entity]:
        """Find an entity by reference."""
        entity_cls = entity_type(ref.kind)
        table = _table(ref.kind)
        stmt = select(table).where(table.c.id == ref.id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_entity(entity_cls, dict(row)) if row else None

    async def save(self, entity: Entity) -> Entity:
        """Save an entity (create or update)."""
        table = _table(entity.kind)
        values = entity_to_dict(entity)

        exists = await self.session.execute(
            select(table.c.id).where(table.c.id == entity.id)
        )
        if exists.first():
            stmt = update(table).where(table.c.id == entity.id).values(**values)
        else:
            stmt = insert(table).values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return entity

    async def apply_vote_delta(self, ref: EntityRef, delta: CounterDelta) -> None:
        """Atomically add ``delta`` to the entity's vote counters."""
        if delta.is_zero:
            return

        table = _table(ref.kind)
        values = {
            name: table.c[name] + amount
            for name, amount in delta.model_dump().items()
            if amount
        }
        stmt = update(table).where(table.c.id == ref.id).values(**values)
        result = await self.session.execute(stmt)
        await self.session.flush()

        if result.rowcount == 0:  # type: ignore[attr-defined]
            logfire.warn("Vote counters target missing", entity=str(ref))


def _table(kind: str) -> Table:
    entity_type(kind)  # Raises NotFoundError for unknown kinds
    return ENTITY_TABLES[kind]
