"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    AnswerId,
    ProfileId,
    QuestionId,
    UserId,
    VoteId,
)
from forum.domain.value.types import (
    Gender,
    QuestionFilter,
    TagName,
    UserRole,
    Username,
    VotableType,
    VoteTarget,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProfileId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    # Types
    "Gender",
    "QuestionFilter",
    "TagName",
    "UserRole",
    "Username",
    "VotableType",
    "VoteTarget",
    "VoteType",
]
