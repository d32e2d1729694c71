"""Cast vote use case."""

from pydantic import BaseModel

from voteable.application.usecase.base import BaseUseCase
from voteable.application.usecase.vote.common import (
    VoteCountersResponse,
    resolve_entity,
    resolve_voter,
)
from voteable.domain.repository import EntityRepository
from voteable.domain.service import VotingService
from voteable.domain.value import Disposition


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    voter_kind: str
    voter_id: str  # UUID string
    voteable_kind: str
    voteable_id: str  # UUID string
    disposition: Disposition
    strict: bool = False  # Raise on duplicate instead of returning success=False


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    success: bool
    disposition: Disposition
    counters: VoteCountersResponse


class CastVoteUseCase(BaseUseCase):
    """Use case for casting an up, down or abstain vote."""

    def __init__(
        self, voting_service: VotingService, entity_repository: EntityRepository
    ) -> None:
        """Initialize cast vote use case.

        Args:
            voting_service: Voting domain service
            entity_repository: Repository used to resolve voter and voteable
        """
        self.voting_service = voting_service
        self.entity_repository = entity_repository

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Cast vote response with the voteable's updated counters

        Raises:
            NotFoundError: If voter or voteable not found
            InvalidVoteableError: If the target kind is not voteable
            AlreadyVotedError: If strict and the vote is a duplicate
        """
        voter = await resolve_voter(
            self.entity_repository, request.voter_kind, request.voter_id
        )
        voteable = await resolve_entity(
            self.entity_repository, request.voteable_kind, request.voteable_id
        )

        if request.strict:
            success = await self.voting_service.cast_vote(
                voter, voteable, request.disposition
            )
        else:
            success = await self.voting_service.cast_vote_ignoring_duplicate(
                voter, voteable, request.disposition
            )

        updated = await self.entity_repository.find_by_ref(voteable.ref())
        return CastVoteResponse(
            success=success,
            disposition=request.disposition,
            counters=VoteCountersResponse.from_entity(updated),  # type: ignore[arg-type]
        )
