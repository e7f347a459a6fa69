"""Transaction manager interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Unit-of-work boundary for forum operations.

    Every consistency rule runs inside ``atomic()`` so the triggering row
    mutation and its derived aggregate updates commit together or not at all.

    Implementations must:
    - commit when the block exits normally
    - roll back every write of the block when it raises
    - re-raise DomainError subclasses unchanged after rollback
    - wrap storage failures in TransactionFailure
    """

    @abstractmethod
    def atomic(self, operation: str) -> AbstractAsyncContextManager[None]:
        """Open a transaction for one logical operation.

        Args:
            operation: Operation name, used in logs and TransactionFailure

        Returns:
            Async context manager delimiting the transaction
        """
        pass
