"""Repository interfaces for the voteable domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from voteable.domain.repository.entity import EntityRepository
from voteable.domain.repository.transaction import TransactionManager
from voteable.domain.repository.vote import VoteRecordRepository

__all__ = [
    "EntityRepository",
    "TransactionManager",
    "VoteRecordRepository",
]
