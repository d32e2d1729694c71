"""Voting domain service."""

from datetime import datetime
from enum import Enum
from typing import Optional, Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from voteable.domain.error import AlreadyVotedError, InvalidVoteableError, NotVotedError
from voteable.domain.model.entity import Entity, Voter
from voteable.domain.model.vote import VoteRecord
from voteable.domain.repository import (
    EntityRepository,
    TransactionManager,
    VoteRecordRepository,
)
from voteable.domain.value import CounterDelta, Disposition, EntityRef, VoteRecordId

from .base import Service


class VoteOutcome(str, Enum):
    """Result of a single voting step."""

    CAST = "cast"
    CHANGED = "changed"
    DUPLICATE = "duplicate"
    RETRACTED = "retracted"
    NOT_VOTED = "not_voted"

    @property
    def succeeded(self) -> bool:
        return self in (VoteOutcome.CAST, VoteOutcome.CHANGED, VoteOutcome.RETRACTED)


class VotingService(Service):
    """Domain service for casting and retracting votes.

    Keeps vote records and the denormalized counters on voteables (and on
    voters that track them) consistent. Each mutation runs in one transaction
    covering the record and both counter sets.

    Entities are immutable and counters change in the store, so the voter
    and voteable passed to a cast or retract keep their old counters.
    Reload them through the EntityRepository to read the new values.
    """

    def __init__(
        self,
        vote_repository: VoteRecordRepository,
        entity_repository: EntityRepository,
        transactions: TransactionManager,
    ) -> None:
        """Initialize voting service.

        Args:
            vote_repository: Vote record repository
            entity_repository: Repository holding voter and voteable counters
            transactions: Transaction manager shared by both repositories
        """
        self.vote_repository = vote_repository
        self.entity_repository = entity_repository
        self.transactions = transactions

    # ------------------------------------------------------------------
    # Casting
    # ------------------------------------------------------------------

    async def cast_up_vote(self, voter: Voter, voteable: Entity) -> bool:
        """Up vote a voteable.

        Changes a down or abstain vote into an up vote.

        Raises:
            InvalidVoteableError: If the target is not voteable
            AlreadyVotedError: If the voter already up voted the target
        """
        return await self.cast_vote(voter, voteable, Disposition.UP)

    async def cast_down_vote(self, voter: Voter, voteable: Entity) -> bool:
        """Down vote a voteable.

        Changes an up or abstain vote into a down vote.

        Raises:
            InvalidVoteableError: If the target is not voteable
            AlreadyVotedError: If the voter already down voted the target
        """
        return await self.cast_vote(voter, voteable, Disposition.DOWN)

    async def cast_abstain_vote(self, voter: Voter, voteable: Entity) -> bool:
        """Abstain on a voteable.

        Raises:
            InvalidVoteableError: If the target is not voteable
            AlreadyVotedError: If the voter already abstained on the target
        """
        return await self.cast_vote(voter, voteable, Disposition.ABSTAIN)

    async def cast_up_vote_ignoring_duplicate(
        self, voter: Voter, voteable: Entity
    ) -> bool:
        """Up vote, returning False instead of raising on a duplicate."""
        return await self.cast_vote_ignoring_duplicate(voter, voteable, Disposition.UP)

    async def cast_down_vote_ignoring_duplicate(
        self, voter: Voter, voteable: Entity
    ) -> bool:
        """Down vote, returning False instead of raising on a duplicate."""
        return await self.cast_vote_ignoring_duplicate(
            voter, voteable, Disposition.DOWN
        )

    async def cast_abstain_vote_ignoring_duplicate(
        self, voter: Voter, voteable: Entity
    ) -> bool:
        """Abstain, returning False instead of raising on a duplicate."""
        return await self.cast_vote_ignoring_duplicate(
            voter, voteable, Disposition.ABSTAIN
        )

    async def cast_vote(
        self, voter: Voter, voteable: Entity, disposition: Disposition
    ) -> bool:
        """Cast ``disposition`` on a voteable.

        Args:
            voter: Entity casting the vote
            voteable: Entity receiving the vote
            disposition: Up, down or abstain

        Returns:
            True once the vote is committed. Counters on ``voter`` and
            ``voteable`` are not refreshed; reload them to read new totals

        Raises:
            InvalidVoteableError: If the target is not voteable
            AlreadyVotedError: If the voter already holds this disposition
        """
        outcome = await self._cast(voter, voteable, disposition)
        if outcome is VoteOutcome.DUPLICATE:
            raise AlreadyVotedError(disposition)
        return True

    async def cast_vote_ignoring_duplicate(
        self, voter: Voter, voteable: Entity, disposition: Disposition
    ) -> bool:
        """Cast ``disposition``, treating a duplicate as a no-op.

        Returns:
            True if the vote was committed, False if it was a duplicate

        Raises:
            InvalidVoteableError: If the target is not voteable
        """
        outcome = await self._cast(voter, voteable, disposition)
        return outcome.succeeded

    # ------------------------------------------------------------------
    # Retracting
    # ------------------------------------------------------------------

    async def retract_vote(self, voter: Voter, voteable: Entity) -> bool:
        """Clear the voter's vote on a voteable.

        Returns:
            True once the retraction is committed. Counters on ``voter``
            and ``voteable`` are not refreshed; reload them to read new totals

        Raises:
            InvalidVoteableError: If the target is not voteable
            NotVotedError: If the voter has not voted on the target
        """
        outcome = await self._retract(voter, voteable)
        if outcome is VoteOutcome.NOT_VOTED:
            raise NotVotedError()
        return True

    async def retract_vote_ignoring_absence(
        self, voter: Voter, voteable: Entity
    ) -> bool:
        """Clear the voter's vote, treating a missing vote as a no-op.

        Returns:
            True if a vote was retracted, False if there was none

        Raises:
            InvalidVoteableError: If the target is not voteable
        """
        outcome = await self._retract(voter, voteable)
        return outcome.succeeded

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def has_voted(self, voter: Voter, voteable: Entity) -> bool:
        """Return True if the voter holds any vote on the voteable."""
        return await self.get_disposition(voter, voteable) is not None

    async def has_voted_up(self, voter: Voter, voteable: Entity) -> bool:
        """Return True if the voter up voted the voteable."""
        return await self.get_disposition(voter, voteable) is Disposition.UP

    async def has_voted_down(self, voter: Voter, voteable: Entity) -> bool:
        """Return True if the voter down voted the voteable."""
        return await self.get_disposition(voter, voteable) is Disposition.DOWN

    async def has_voted_abstain(self, voter: Voter, voteable: Entity) -> bool:
        """Return True if the voter abstained on the voteable."""
        return await self.get_disposition(voter, voteable) is Disposition.ABSTAIN

    async def get_disposition(
        self, voter: Voter, voteable: Entity
    ) -> Optional[Disposition]:
        """Return the voter's current disposition, or None if not voted.

        Raises:
            InvalidVoteableError: If the target is not voteable
        """
        self._check_voteable(voteable)
        record = await self.vote_repository.find(_ref(voter), voteable.ref())
        return record.disposition if record else None

    async def get_dispositions(
        self, voter: Voter, voteables: Sequence[Entity]
    ) -> dict[EntityRef, Optional[Disposition]]:
        """Return the voter's disposition on each voteable.

        Args:
            voter: Entity whose votes to look up
            voteables: Voteables to check

        Returns:
            Mapping of voteable reference to disposition (None if not voted)

        Raises:
            InvalidVoteableError: If any target is not voteable
        """
        if not voteables:
            return {}

        for voteable in voteables:
            self._check_voteable(voteable)

        refs = [v.ref() for v in voteables]

        # Batch query to fetch all records at once (avoid N+1)
        records = await self.vote_repository.find_by_voter_and_voteables(
            _ref(voter), refs
        )
        found = {record.voteable: record.disposition for record in records}

        return {ref: found.get(ref) for ref in refs}

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _cast(
        self, voter: Voter, voteable: Entity, disposition: Disposition
    ) -> VoteOutcome:
        self._check_voteable(voteable)
        voter_ref = _ref(voter)
        voteable_ref = voteable.ref()

        with logfire.span(
            "cast_vote",
            voter=str(voter_ref),
            voteable=str(voteable_ref),
            disposition=disposition.value,
        ):
            try:
                async with self.transactions.transaction():
                    outcome = await self._apply_cast(
                        voter, voter_ref, voteable_ref, disposition
                    )
            except IntegrityError:
                # A concurrent request created the record first. Its
                # disposition may differ, so re-read it and apply once more.
                logfire.warn(
                    "Concurrent vote insert, retrying",
                    voter=str(voter_ref),
                    voteable=str(voteable_ref),
                )
                try:
                    async with self.transactions.transaction():
                        outcome = await self._apply_cast(
                            voter, voter_ref, voteable_ref, disposition
                        )
                except IntegrityError:
                    logfire.warn(
                        "Concurrent vote insert lost twice",
                        voter=str(voter_ref),
                        voteable=str(voteable_ref),
                    )
                    return VoteOutcome.DUPLICATE

            if outcome is VoteOutcome.DUPLICATE:
                logfire.warn(
                    "Duplicate vote attempt",
                    voter=str(voter_ref),
                    voteable=str(voteable_ref),
                    disposition=disposition.value,
                )
            else:
                logfire.info(
                    "Vote committed",
                    voter=str(voter_ref),
                    voteable=str(voteable_ref),
                    disposition=disposition.value,
                    outcome=outcome.value,
                )
            return outcome

    async def _apply_cast(
        self,
        voter: Voter,
        voter_ref: EntityRef,
        voteable_ref: EntityRef,
        disposition: Disposition,
    ) -> VoteOutcome:
        record = await self.vote_repository.find(
            voter_ref, voteable_ref, for_update=True
        )

        if record is None:
            await self.vote_repository.create(
                VoteRecord(
                    id=VoteRecordId(uuid4()),
                    voter=voter_ref,
                    voteable=voteable_ref,
                    disposition=disposition,
                )
            )
            delta = CounterDelta.of(disposition, 1)
            outcome = VoteOutcome.CAST
        elif record.disposition is disposition:
            return VoteOutcome.DUPLICATE
        else:
            await self.vote_repository.update(
                record.model_copy(
                    update={"disposition": disposition, "updated_at": datetime.now()}
                )
            )
            delta = CounterDelta.of(record.disposition, -1) + CounterDelta.of(
                disposition, 1
            )
            outcome = VoteOutcome.CHANGED

        await self._apply_delta(voter, voter_ref, voteable_ref, delta)
        return outcome

    async def _retract(self, voter: Voter, voteable: Entity) -> VoteOutcome:
        self._check_voteable(voteable)
        voter_ref = _ref(voter)
        voteable_ref = voteable.ref()

        with logfire.span(
            "retract_vote", voter=str(voter_ref), voteable=str(voteable_ref)
        ):
            async with self.transactions.transaction():
                record = await self.vote_repository.find(
                    voter_ref, voteable_ref, for_update=True
                )
                if record is None:
                    logfire.info(
                        "No vote to retract",
                        voter=str(voter_ref),
                        voteable=str(voteable_ref),
                    )
                    return VoteOutcome.NOT_VOTED

                await self._apply_delta(
                    voter,
                    voter_ref,
                    voteable_ref,
                    CounterDelta.of(record.disposition, -1),
                )
                await self.vote_repository.delete(record)

            logfire.info(
                "Vote retracted",
                voter=str(voter_ref),
                voteable=str(voteable_ref),
                disposition=record.disposition.value,
            )
            return VoteOutcome.RETRACTED

    async def _apply_delta(
        self,
        voter: Voter,
        voter_ref: EntityRef,
        voteable_ref: EntityRef,
        delta: CounterDelta,
    ) -> None:
        # Voter counters are opt-in
        if _tracks_vote_counters(voter):
            await self.entity_repository.apply_vote_delta(voter_ref, delta)
        await self.entity_repository.apply_vote_delta(voteable_ref, delta)

    @staticmethod
    def _check_voteable(voteable: Entity) -> None:
        if not (isinstance(voteable, Entity) and voteable.is_voteable()):
            kind = getattr(voteable, "kind", type(voteable).__name__)
            logfire.error("Vote target is not voteable", kind=kind)
            raise InvalidVoteableError(kind)


def _ref(voter: Voter) -> EntityRef:
    if not isinstance(voter, Entity):
        raise TypeError(f"{type(voter).__name__} is not a persisted entity")
    return voter.ref()


def _tracks_vote_counters(voter: Voter) -> bool:
    return isinstance(voter, Entity) and voter.tracks_vote_counters()
