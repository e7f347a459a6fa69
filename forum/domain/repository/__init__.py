"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from forum.domain.repository.answer import AnswerRepository
from forum.domain.repository.profile import ProfileRepository
from forum.domain.repository.question import QuestionRepository
from forum.domain.repository.transaction import TransactionManager
from forum.domain.repository.vote import VoteRepository

__all__ = [
    "ProfileRepository",
    "QuestionRepository",
    "AnswerRepository",
    "VoteRepository",
    "TransactionManager",
]
