"""Transaction manager interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Unit of work spanning every repository bound to the same store.

    Usage:
        async with transactions.transaction():
            await vote_repository.create(record)
            await entity_repository.apply_vote_delta(ref, delta)

    All writes inside the block commit together when it exits cleanly and are
    rolled back if it raises.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction scope."""
        pass
