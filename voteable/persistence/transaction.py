"""SQLAlchemy transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from voteable.domain.repository import TransactionManager


class SqlAlchemyTransactionManager(TransactionManager):
    """Transaction scope over the request's async session.

    Opens a real transaction when the session is idle. When the session
    already has one open (the request-scoped session autobegins on the first
    statement) a SAVEPOINT is used instead, so the block still rolls back on
    its own and the outer request commit makes it durable.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self.session.in_transaction():
            async with self.session.begin_nested():
                yield
        else:
            async with self.session.begin():
                yield
            logfire.debug("Transaction committed")
