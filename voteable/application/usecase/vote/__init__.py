"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .common import VoteCountersResponse
from .get_vote_counters import GetVoteCountersRequest, GetVoteCountersUseCase
from .get_vote_status import (
    GetVoteStatusRequest,
    GetVoteStatusUseCase,
    VoteStatusResponse,
)
from .retract_vote import RetractVoteRequest, RetractVoteResponse, RetractVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "RetractVoteRequest",
    "RetractVoteResponse",
    "RetractVoteUseCase",
    "GetVoteStatusRequest",
    "GetVoteStatusUseCase",
    "VoteStatusResponse",
    "GetVoteCountersRequest",
    "GetVoteCountersUseCase",
    "VoteCountersResponse",
]
