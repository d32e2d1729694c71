"""Vote routes.

Voters are identified in the request itself; authenticating them is left to
the embedding application.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from voteable.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteCountersRequest,
    GetVoteCountersUseCase,
    GetVoteStatusRequest,
    GetVoteStatusUseCase,
    RetractVoteRequest,
    RetractVoteResponse,
    RetractVoteUseCase,
    VoteCountersResponse,
    VoteStatusResponse,
)
from voteable.domain.error import (
    AlreadyVotedError,
    DomainError,
    InvalidVoteableError,
    NotFoundError,
    NotVotedError,
    ValidationError,
)
from voteable.domain.value import Disposition

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteBody(BaseModel):
    """Body of a cast vote request."""

    voter_kind: str
    voter_id: str
    disposition: Disposition
    strict: bool = False


def to_http_error(error: Exception) -> HTTPException:
    """Translate a domain error raised by a use case into an HTTP error."""
    if isinstance(error, (NotFoundError, NotVotedError)):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, AlreadyVotedError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(error, (InvalidVoteableError, ValidationError, ValueError)):
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(error))


@router.post("/{voteable_kind}/{voteable_id}/votes", response_model=CastVoteResponse)
async def cast_vote(
    voteable_kind: str,
    voteable_id: str,
    body: CastVoteBody,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Cast an up, down or abstain vote.

    A differing vote replaces the voter's previous one. Casting the same
    vote again returns success=false, or 409 when ``strict`` is set.

    Raises:
        HTTPException: If voter or voteable not found, target not voteable,
            or duplicate vote in strict mode
    """
    try:
        request = CastVoteRequest(
            voter_kind=body.voter_kind,
            voter_id=body.voter_id,
            voteable_kind=voteable_kind,
            voteable_id=voteable_id,
            disposition=body.disposition,
            strict=body.strict,
        )
        return await cast_vote_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.delete(
    "/{voteable_kind}/{voteable_id}/votes", response_model=RetractVoteResponse
)
async def retract_vote(
    voteable_kind: str,
    voteable_id: str,
    voter_kind: str,
    voter_id: str,
    retract_vote_use_case: FromDishka[RetractVoteUseCase],
    strict: bool = False,
) -> RetractVoteResponse:
    """Retract the voter's vote.

    Raises:
        HTTPException: If voter or voteable not found, target not voteable,
            or no vote to retract in strict mode
    """
    try:
        request = RetractVoteRequest(
            voter_kind=voter_kind,
            voter_id=voter_id,
            voteable_kind=voteable_kind,
            voteable_id=voteable_id,
            strict=strict,
        )
        return await retract_vote_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get(
    "/{voteable_kind}/{voteable_id}/votes/status", response_model=VoteStatusResponse
)
async def get_vote_status(
    voteable_kind: str,
    voteable_id: str,
    voter_kind: str,
    voter_id: str,
    vote_status_use_case: FromDishka[GetVoteStatusUseCase],
) -> VoteStatusResponse:
    """Report how a voter voted on a voteable."""
    try:
        request = GetVoteStatusRequest(
            voter_kind=voter_kind,
            voter_id=voter_id,
            voteable_kind=voteable_kind,
            voteable_id=voteable_id,
        )
        return await vote_status_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_error(e)


@router.get(
    "/{voteable_kind}/{voteable_id}/votes/counters",
    response_model=VoteCountersResponse,
)
async def get_vote_counters(
    voteable_kind: str,
    voteable_id: str,
    vote_counters_use_case: FromDishka[GetVoteCountersUseCase],
) -> VoteCountersResponse:
    """Return a voteable's up/down/abstain counters."""
    try:
        request = GetVoteCountersRequest(
            voteable_kind=voteable_kind, voteable_id=voteable_id
        )
        return await vote_counters_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_error(e)
