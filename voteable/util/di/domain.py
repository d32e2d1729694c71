"""Domain layer DI providers."""

from dishka import Scope, provide

from voteable.domain.repository import (
    EntityRepository,
    TransactionManager,
    VoteRecordRepository,
)
from voteable.domain.service import VotingService
from voteable.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_voting_service(
        self,
        vote_repository: VoteRecordRepository,
        entity_repository: EntityRepository,
        transactions: TransactionManager,
    ) -> VotingService:
        """Provide voting domain service."""
        return VotingService(
            vote_repository=vote_repository,
            entity_repository=entity_repository,
            transactions=transactions,
        )
