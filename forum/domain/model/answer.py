"""Answer entity."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    At most one answer per question has is_accepted=True.
    """

    id: AnswerId
    question_id: QuestionId
    body: str = Field(min_length=1)
    user_id: UserId
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def score(self) -> int:
        return self.upvote_count - self.downvote_count
