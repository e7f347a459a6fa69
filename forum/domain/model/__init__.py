"""Domain model entities for the forum."""

from forum.domain.model.answer import Answer
from forum.domain.model.profile import Profile
from forum.domain.model.question import Question
from forum.domain.model.vote import Vote

__all__ = [
    "Profile",
    "Question",
    "Answer",
    "Vote",
]
