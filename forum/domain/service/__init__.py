"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .jwt_service import JWTService
from .profile_service import ProfileService
from .question_service import QuestionService
from .vote_service import VoteService

__all__ = [
    "AnswerService",
    "JWTService",
    "ProfileService",
    "QuestionService",
    "Service",
    "VoteService",
]
