"""Vote entity.

Votes are upvotes or downvotes on a question or an answer.
Each principal can hold one vote per target.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import AnswerId, QuestionId, UserId, VoteId, VoteTarget, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - Exactly one of question_id / answer_id is set
    - One vote per principal per target (enforced by unique constraints)
    - Changing opinion replaces vote_type on the existing row
    """

    id: VoteId
    user_id: UserId
    vote_type: VoteType
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_single_target(self) -> "Vote":
        """Validate that the vote points at exactly one target."""
        if (self.question_id is None) == (self.answer_id is None):
            raise ValueError("Vote must target exactly one of question or answer")
        return self

    @classmethod
    def for_target(
        cls,
        id: VoteId,
        user_id: UserId,
        target: VoteTarget,
        vote_type: VoteType,
    ) -> "Vote":
        """Build a vote pointing at the given target."""
        if target.is_question:
            return cls(
                id=id,
                user_id=user_id,
                vote_type=vote_type,
                question_id=QuestionId(target.id),
            )
        return cls(
            id=id,
            user_id=user_id,
            vote_type=vote_type,
            answer_id=AnswerId(target.id),
        )

    @property
    def target(self) -> VoteTarget:
        if self.question_id is not None:
            return VoteTarget.question(self.question_id)
        return VoteTarget.answer(AnswerId(self.answer_id))  # type: ignore[arg-type]
