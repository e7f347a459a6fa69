"""Question aggregate root.

A question carries denormalized aggregates (vote counters, answer count and
the accepted-answer flag) that are maintained by the domain services and
never written directly by callers.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import QuestionId, TagName, UserId


class Question(DomainModel):
    """Question aggregate root.

    Aggregate invariants:
    - answer_count equals the number of live answers to this question
    - has_accepted_answer is True iff one live answer has is_accepted=True
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1)
    tags: list[TagName] = Field(default_factory=list)
    user_id: UserId
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    answer_count: int = Field(default=0, ge=0)
    has_accepted_answer: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def score(self) -> int:
        return self.upvote_count - self.downvote_count
