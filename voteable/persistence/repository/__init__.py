"""PostgreSQL repository implementations."""

from voteable.persistence.repository.entity import PostgresEntityRepository
from voteable.persistence.repository.vote import PostgresVoteRecordRepository

__all__ = [
    "PostgresEntityRepository",
    "PostgresVoteRecordRepository",
]
