"""Get vote counters use case."""

from pydantic import BaseModel

from voteable.application.usecase.base import BaseUseCase
from voteable.application.usecase.vote.common import (
    VoteCountersResponse,
    resolve_entity,
)
from voteable.domain.error import InvalidVoteableError
from voteable.domain.repository import EntityRepository


class GetVoteCountersRequest(BaseModel):
    """Vote counters request."""

    voteable_kind: str
    voteable_id: str


class GetVoteCountersUseCase(BaseUseCase):
    """Use case for reading a voteable's denormalized counters."""

    def __init__(self, entity_repository: EntityRepository) -> None:
        self.entity_repository = entity_repository

    async def execute(self, request: GetVoteCountersRequest) -> VoteCountersResponse:
        """Execute get counters flow.

        Raises:
            NotFoundError: If the voteable does not exist
            InvalidVoteableError: If the kind is not voteable
        """
        voteable = await resolve_entity(
            self.entity_repository, request.voteable_kind, request.voteable_id
        )
        if not voteable.is_voteable():
            raise InvalidVoteableError(voteable.kind)

        return VoteCountersResponse.from_entity(voteable)  # type: ignore[arg-type]
