"""PostgreSQL implementation of VoteRecord repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from voteable.domain.model import VoteRecord
from voteable.domain.repository import VoteRecordRepository
from voteable.domain.value import Disposition, EntityRef
from voteable.persistence.mappers import row_to_vote_record, vote_record_to_dict
from voteable.persistence.tables import vote_records_table


def _matches(voter: EntityRef, voteable: EntityRef):
    return and_(
        vote_records_table.c.voter_type == voter.kind,
        vote_records_table.c.voter_id == voter.id,
        vote_records_table.c.voteable_type == voteable.kind,
        vote_records_table.c.voteable_id == voteable.id,
    )


class PostgresVoteRecordRepository(VoteRecordRepository):
    """PostgreSQL implementation of VoteRecordRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self,
        voter: EntityRef,
        voteable: EntityRef,
        *,
        for_update: bool = False,
    ) -> Optional[VoteRecord]:
        """Find the record for a voter/voteable pair."""
        stmt = select(vote_records_table).where(_matches(voter, voteable))
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote_record(row._asdict()) if row else None

    async def create(self, record: VoteRecord) -> VoteRecord:
        """Create a record."""
        stmt = insert(vote_records_table).values(**vote_record_to_dict(record))
        await self.session.execute(stmt)
        await self.session.flush()
        return record

    async def update(self, record: VoteRecord) -> VoteRecord:
        """Update the disposition of an existing record."""
        stmt = (
            update(vote_records_table)
            .where(_matches(record.voter, record.voteable))
            .values(
                disposition=record.disposition.value,
                updated_at=record.updated_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return record

    async def delete(self, record: VoteRecord) -> bool:
        """Delete a record by its composite key."""
        stmt = delete(vote_records_table).where(
            _matches(record.voter, record.voteable)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_voter(self, voter: EntityRef) -> List[VoteRecord]:
        """Find all records cast by a voter."""
        stmt = select(vote_records_table).where(
            and_(
                vote_records_table.c.voter_type == voter.kind,
                vote_records_table.c.voter_id == voter.id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote_record(row._asdict()) for row in result.fetchall()]

    async def find_by_voteable(self, voteable: EntityRef) -> List[VoteRecord]:
        """Find all records referencing a voteable."""
        stmt = select(vote_records_table).where(
            and_(
                vote_records_table.c.voteable_type == voteable.kind,
                vote_records_table.c.voteable_id == voteable.id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote_record(row._asdict()) for row in result.fetchall()]

    async def find_by_voter_and_voteables(
        self,
        voter: EntityRef,
        voteables: Sequence[EntityRef],
    ) -> List[VoteRecord]:
        """Find a voter's records on multiple voteables (batch query)."""
        if not voteables:
            return []

        # Group ids by kind so each kind becomes one IN clause
        ids_by_kind: dict[str, list] = {}
        for ref in voteables:
            ids_by_kind.setdefault(ref.kind, []).append(ref.id)

        stmt = select(vote_records_table).where(
            and_(
                vote_records_table.c.voter_type == voter.kind,
                vote_records_table.c.voter_id == voter.id,
                or_(
                    *(
                        and_(
                            vote_records_table.c.voteable_type == kind,
                            vote_records_table.c.voteable_id.in_(ids),
                        )
                        for kind, ids in ids_by_kind.items()
                    )
                ),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote_record(row._asdict()) for row in result.fetchall()]

    async def count_by_voteable(
        self,
        voteable: EntityRef,
        disposition: Optional[Disposition] = None,
    ) -> int:
        """Count records referencing a voteable."""
        stmt = select(func.count()).where(
            and_(
                vote_records_table.c.voteable_type == voteable.kind,
                vote_records_table.c.voteable_id == voteable.id,
            )
        )
        if disposition is not None:
            stmt = stmt.where(vote_records_table.c.disposition == disposition.value)
        result = await self.session.execute(stmt)
        return result.scalar_one()
