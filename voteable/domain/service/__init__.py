"""Domain services."""

from .base import Service
from .voting_service import VoteOutcome, VotingService

__all__ = [
    "Service",
    "VoteOutcome",
    "VotingService",
]
