"""Strongly typed identifiers for forum domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Principal issued by the external auth provider (JWT "sub" claim)
UserId = NewType("UserId", UUID)

# Core domain entity identifiers
ProfileId = NewType("ProfileId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
VoteId = NewType("VoteId", UUID)
