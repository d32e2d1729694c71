"""In-memory transaction manager for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from voteable.domain.repository import TransactionManager
from voteable.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryTransactionManager(TransactionManager):
    """Snapshot on entry, restore if the block raises."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        snapshot = self.database.snapshot()
        try:
            yield
        except BaseException:
            self.database.restore(snapshot)
            raise
