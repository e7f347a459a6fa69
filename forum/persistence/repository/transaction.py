"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import DomainError, TransactionFailure
from forum.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Commits or rolls back the request session around one operation.

    Row locks taken with SELECT ... FOR UPDATE inside the block are held
    until the commit or rollback at the end of it. A nested ``atomic()``
    joins the enclosing transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize transaction manager.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session
        self._depth = 0

    @asynccontextmanager
    async def atomic(self, operation: str) -> AsyncIterator[None]:
        if self._depth:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            return

        self._depth = 1
        try:
            yield
            await self.session.commit()
            logfire.debug("Transaction committed", operation=operation)
        except DomainError:
            await self.session.rollback()
            logfire.info("Transaction rolled back", operation=operation)
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            logfire.error(
                "Transaction failed", operation=operation, error=str(e)
            )
            raise TransactionFailure(operation, str(e)) from e
        except BaseException:
            await self.session.rollback()
            raise
        finally:
            self._depth = 0
