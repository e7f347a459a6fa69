"""In-memory transaction manager for testing."""

import asyncio
import inspect
from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire

from forum.domain.error import DomainError, TransactionFailure
from forum.domain.repository import TransactionManager

from .database import InMemoryDatabase, StorageError


class InMemoryTransactionManager(TransactionManager):
    """Serializes transactions and restores a snapshot on failure.

    A single lock over the whole database is coarser than PostgreSQL row
    locks but gives the same outcome: concurrent operations on a target
    apply one after another. Nested ``atomic()`` calls from the task that
    holds the lock join the outer transaction.

    Only storage failures become ``TransactionFailure``: a ``StorageError``
    from the tables or an exception from the ``before_commit`` hook, which
    stands in for the commit. Anything else rolls back and propagates as is.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    @asynccontextmanager
    async def atomic(self, operation: str) -> AsyncIterator[None]:
        db = self.database
        current = asyncio.current_task()
        if db.owner is not None and db.owner is current:
            yield
            return

        async with db.lock:
            db.owner = current
            snapshot = db.snapshot()
            try:
                try:
                    yield
                except DomainError:
                    db.restore(snapshot)
                    logfire.info("Transaction rolled back", operation=operation)
                    raise
                except StorageError as e:
                    db.restore(snapshot)
                    logfire.error(
                        "Transaction failed", operation=operation, error=str(e)
                    )
                    raise TransactionFailure(operation, str(e)) from e
                except BaseException:
                    db.restore(snapshot)
                    raise

                try:
                    await self._commit(operation)
                except Exception as e:
                    db.restore(snapshot)
                    logfire.error(
                        "Transaction commit failed", operation=operation, error=str(e)
                    )
                    raise TransactionFailure(operation, str(e)) from e
            finally:
                db.owner = None

    async def _commit(self, operation: str) -> None:
        if self.database.before_commit is None:
            return
        result = self.database.before_commit(operation)
        if inspect.isawaitable(result):
            await result
