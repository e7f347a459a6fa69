"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import Answer, Profile, Question, Vote
from forum.domain.value import (
    AnswerId,
    Gender,
    ProfileId,
    QuestionId,
    TagName,
    UserId,
    UserRole,
    Username,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        username=Username(row["username"]),
        full_name=row.get("full_name") or "",
        email=row["email"],
        gender=Gender(row["gender"]) if row.get("gender") else None,
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        role=UserRole(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    data = profile.model_dump()
    data["username"] = profile.username.root
    data["gender"] = profile.gender.value if profile.gender else None
    data["role"] = profile.role.value
    return data


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        tags=[TagName(tag) for tag in row.get("tags") or []],
        user_id=UserId(_uuid(row["user_id"])),
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        answer_count=row["answer_count"],
        has_accepted_answer=row["has_accepted_answer"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    data = question.model_dump()
    data["tags"] = [tag.root for tag in question.tags]
    return data


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        body=row["body"],
        user_id=UserId(_uuid(row["user_id"])),
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        is_accepted=row["is_accepted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    return answer.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    question_id = row.get("question_id")
    answer_id = row.get("answer_id")
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        vote_type=VoteType(row["vote_type"]),
        question_id=QuestionId(_uuid(question_id)) if question_id else None,
        answer_id=AnswerId(_uuid(answer_id)) if answer_id else None,
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    return data
