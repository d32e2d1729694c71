"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .entity import InMemoryEntityRepository
from .transaction import InMemoryTransactionManager
from .vote import InMemoryVoteRecordRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryEntityRepository",
    "InMemoryTransactionManager",
    "InMemoryVoteRecordRepository",
]
