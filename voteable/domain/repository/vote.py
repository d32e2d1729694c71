"""Vote record repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from voteable.domain.model.vote import VoteRecord
from voteable.domain.value import Disposition, EntityRef


class VoteRecordRepository(ABC):
    """Repository for VoteRecord entity.

    Records are addressed by their composite key (voter, voteable).
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find(
        self,
        voter: EntityRef,
        voteable: EntityRef,
        *,
        for_update: bool = False,
    ) -> Optional[VoteRecord]:
        """Find the record for a voter/voteable pair.

        Args:
            voter: Reference to the voter
            voteable: Reference to the voteable
            for_update: Lock the row until the surrounding transaction ends

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, record: VoteRecord) -> VoteRecord:
        """Create a record.

        Args:
            record: The record to create

        Returns:
            The created record

        Raises:
            IntegrityError: If a record already exists for this pair
        """
        pass

    @abstractmethod
    async def update(self, record: VoteRecord) -> VoteRecord:
        """Update the disposition of an existing record.

        Args:
            record: The record carrying the new disposition

        Returns:
            The updated record
        """
        pass

    @abstractmethod
    async def delete(self, record: VoteRecord) -> bool:
        """Delete a record by its composite key.

        Args:
            record: The record to delete

        Returns:
            True if a record was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_voter(self, voter: EntityRef) -> List[VoteRecord]:
        """Find all records cast by a voter."""
        pass

    @abstractmethod
    async def find_by_voteable(self, voteable: EntityRef) -> List[VoteRecord]:
        """Find all records referencing a voteable."""
        pass

    @abstractmethod
    async def find_by_voter_and_voteables(
        self,
        voter: EntityRef,
        voteables: Sequence[EntityRef],
    ) -> List[VoteRecord]:
        """Find a voter's records on multiple voteables (batch query).

        Args:
            voter: Reference to the voter
            voteables: Voteables to check, possibly of mixed kinds

        Returns:
            Records of the voter on the given voteables
        """
        pass

    @abstractmethod
    async def count_by_voteable(
        self,
        voteable: EntityRef,
        disposition: Optional[Disposition] = None,
    ) -> int:
        """Count records referencing a voteable.

        Args:
            voteable: Reference to the voteable
            disposition: Only count records with this disposition

        Returns:
            Number of records
        """
        pass
