"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .database import InMemoryDatabase, StorageError
from .profile import InMemoryProfileRepository
from .question import InMemoryQuestionRepository
from .transaction import InMemoryTransactionManager
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryDatabase",
    "InMemoryProfileRepository",
    "InMemoryQuestionRepository",
    "InMemoryTransactionManager",
    "InMemoryVoteRepository",
    "StorageError",
]
