"""In-memory vote record repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from voteable.domain.model.vote import VoteRecord
from voteable.domain.repository.vote import VoteRecordRepository
from voteable.domain.value import Disposition, EntityRef
from voteable.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryVoteRecordRepository(VoteRecordRepository):
    """In-memory implementation of VoteRecordRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find(
        self,
        voter: EntityRef,
        voteable: EntityRef,
        *,
        for_update: bool = False,
    ) -> Optional[VoteRecord]:
        """Find the record for a voter/voteable pair."""
        for record in self.database.vote_records:
            if record.voter == voter and record.voteable == voteable:
                return record
        return None

    async def create(self, record: VoteRecord) -> VoteRecord:
        """Create a record.

        Raises:
            IntegrityError: If a record already exists for this pair
        """
        if await self.find(record.voter, record.voteable):
            raise IntegrityError("Duplicate vote record", None, Exception())

        self.database.vote_records.append(record)
        return record

    async def update(self, record: VoteRecord) -> VoteRecord:
        """Update the disposition of an existing record."""
        records = self.database.vote_records
        for i, existing in enumerate(records):
            if existing.voter == record.voter and existing.voteable == record.voteable:
                records[i] = existing.model_copy(
                    update={
                        "disposition": record.disposition,
                        "updated_at": record.updated_at,
                    }
                )
                return records[i]
        return record

    async def delete(self, record: VoteRecord) -> bool:
        """Delete a record by its composite key."""
        records = self.database.vote_records
        for i, existing in enumerate(records):
            if existing.voter == record.voter and existing.voteable == record.voteable:
                records.pop(i)
                return True
        return False

    async def find_by_voter(self, voter: EntityRef) -> list[VoteRecord]:
        """Find all records cast by a voter."""
        return [r for r in self.database.vote_records if r.voter == voter]

    async def find_by_voteable(self, voteable: EntityRef) -> list[VoteRecord]:
        """Find all records referencing a voteable."""
        return [r for r in self.database.vote_records if r.voteable == voteable]

    async def find_by_voter_and_voteables(
        self,
        voter: EntityRef,
        voteables: Sequence[EntityRef],
    ) -> list[VoteRecord]:
        """Find a voter's records on multiple voteables (batch query)."""
        if not voteables:
            return []

        wanted = set(voteables)
        return [
            r
            for r in self.database.vote_records
            if r.voter == voter and r.voteable in wanted
        ]

    async def count_by_voteable(
        self,
        voteable: EntityRef,
        disposition: Optional[Disposition] = None,
    ) -> int:
        """Count records referencing a voteable."""
        return sum(
            1
            for r in self.database.vote_records
            if r.voteable == voteable
            and (disposition is None or r.disposition is disposition)
        )
