"""Application layer DI providers."""

from dishka import Scope, provide

from voteable.application.usecase.vote import (
    CastVoteUseCase,
    GetVoteCountersUseCase,
    GetVoteStatusUseCase,
    RetractVoteUseCase,
)
from voteable.domain.repository import EntityRepository
from voteable.domain.service import VotingService
from voteable.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, voting_service: VotingService, entity_repository: EntityRepository
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            voting_service=voting_service, entity_repository=entity_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_retract_vote_use_case(
        self, voting_service: VotingService, entity_repository: EntityRepository
    ) -> RetractVoteUseCase:
        """Provide retract vote use case."""
        return RetractVoteUseCase(
            voting_service=voting_service, entity_repository=entity_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_status_use_case(
        self, voting_service: VotingService, entity_repository: EntityRepository
    ) -> GetVoteStatusUseCase:
        """Provide vote status use case."""
        return GetVoteStatusUseCase(
            voting_service=voting_service, entity_repository=entity_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_counters_use_case(
        self, entity_repository: EntityRepository
    ) -> GetVoteCountersUseCase:
        """Provide vote counters use case."""
        return GetVoteCountersUseCase(entity_repository=entity_repository)
