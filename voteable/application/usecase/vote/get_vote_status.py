"""Get vote status use case."""

from typing import Optional

from pydantic import BaseModel

from voteable.application.usecase.base import BaseUseCase
from voteable.application.usecase.vote.common import resolve_entity, resolve_voter
from voteable.domain.repository import EntityRepository
from voteable.domain.service import VotingService
from voteable.domain.value import Disposition


class GetVoteStatusRequest(BaseModel):
    """Vote status request."""

    voter_kind: str
    voter_id: str
    voteable_kind: str
    voteable_id: str


class VoteStatusResponse(BaseModel):
    """A voter's current vote on one voteable."""

    voted: bool
    disposition: Optional[Disposition]
    up: bool
    down: bool
    abstain: bool


class GetVoteStatusUseCase(BaseUseCase):
    """Use case for checking how a voter voted on a voteable."""

    def __init__(
        self, voting_service: VotingService, entity_repository: EntityRepository
    ) -> None:
        self.voting_service = voting_service
        self.entity_repository = entity_repository

    async def execute(self, request: GetVoteStatusRequest) -> VoteStatusResponse:
        voter = await resolve_voter(
            self.entity_repository, request.voter_kind, request.voter_id
        )
        voteable = await resolve_entity(
            self.entity_repository, request.voteable_kind, request.voteable_id
        )

        disposition = await self.voting_service.get_disposition(voter, voteable)

        return VoteStatusResponse(
            voted=disposition is not None,
            disposition=disposition,
            up=disposition is Disposition.UP,
            down=disposition is Disposition.DOWN,
            abstain=disposition is Disposition.ABSTAIN,
        )
