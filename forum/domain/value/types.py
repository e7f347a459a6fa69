"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from uuid import UUID

from pydantic import field_validator

from forum.domain.value.common import RootValueObject, ValueObject
from forum.domain.value.identifiers import AnswerId, QuestionId


class VoteType(str, Enum):
    """Kind of vote a principal can cast on a question or answer."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class UserRole(str, Enum):
    """Role of a profile."""

    USER = "user"
    ADMIN = "admin"


class Gender(str, Enum):
    """Optional self-described gender on a profile."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class QuestionFilter(str, Enum):
    """Listing filters for questions.

    Every filter also decides the sort order:
    - newest/unanswered: created_at DESC
    - oldest: created_at ASC
    - most_voted: upvote_count DESC
    """

    NEWEST = "newest"
    OLDEST = "oldest"
    MOST_VOTED = "most_voted"
    UNANSWERED = "unanswered"


class TagName(RootValueObject[str]):
    """Free-form tag attached to a question.

    Tags are normalized to trimmed lowercase, 1-30 characters, no whitespace.
    Examples: 'python', 'sql', 'react-hooks'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Normalize and validate tag name."""
        v = v.strip().lower()
        if not v or len(v) > 30:
            raise ValueError("Tag name must be 1-30 characters")
        if re.search(r"\s", v):
            raise ValueError("Tag name must not contain whitespace")
        return v


class Username(RootValueObject[str]):
    """Public username of a profile (1-50 characters)."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        return v


class VoteTarget(ValueObject):
    """The question or answer a vote points at."""

    type: VotableType
    id: UUID

    @classmethod
    def question(cls, question_id: QuestionId) -> "VoteTarget":
        return cls(type=VotableType.QUESTION, id=question_id)

    @classmethod
    def answer(cls, answer_id: AnswerId) -> "VoteTarget":
        return cls(type=VotableType.ANSWER, id=answer_id)

    @property
    def is_question(self) -> bool:
        return self.type == VotableType.QUESTION
