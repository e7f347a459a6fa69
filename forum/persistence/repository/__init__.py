"""PostgreSQL repository implementations."""

from forum.persistence.repository.answer import PostgresAnswerRepository
from forum.persistence.repository.profile import PostgresProfileRepository
from forum.persistence.repository.question import PostgresQuestionRepository
from forum.persistence.repository.transaction import PostgresTransactionManager
from forum.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresVoteRepository",
    "PostgresTransactionManager",
]
