"""Retract vote use case."""

from pydantic import BaseModel

from voteable.application.usecase.base import BaseUseCase
from voteable.application.usecase.vote.common import resolve_entity, resolve_voter
from voteable.domain.repository import EntityRepository
from voteable.domain.service import VotingService


class RetractVoteRequest(BaseModel):
    """Retract vote request."""

    voter_kind: str
    voter_id: str  # UUID string
    voteable_kind: str
    voteable_id: str  # UUID string
    strict: bool = False  # Raise when there is no vote to retract


class RetractVoteResponse(BaseModel):
    """Retract vote response."""

    success: bool
    message: str


class RetractVoteUseCase(BaseUseCase):
    """Use case for retracting a vote."""

    def __init__(
        self, voting_service: VotingService, entity_repository: EntityRepository
    ) -> None:
        self.voting_service = voting_service
        self.entity_repository = entity_repository

    async def execute(self, request: RetractVoteRequest) -> RetractVoteResponse:
        """Execute retract vote flow.

        Raises:
            NotFoundError: If voter or voteable not found
            InvalidVoteableError: If the target kind is not voteable
            NotVotedError: If strict and there is no vote to retract
        """
        voter = await resolve_voter(
            self.entity_repository, request.voter_kind, request.voter_id
        )
        voteable = await resolve_entity(
            self.entity_repository, request.voteable_kind, request.voteable_id
        )

        if request.strict:
            retracted = await self.voting_service.retract_vote(voter, voteable)
        else:
            retracted = await self.voting_service.retract_vote_ignoring_absence(
                voter, voteable
            )

        if retracted:
            return RetractVoteResponse(
                success=True,
                message="Vote retracted successfully",
            )
        else:
            return RetractVoteResponse(
                success=False,
                message="No vote found to retract",
            )
