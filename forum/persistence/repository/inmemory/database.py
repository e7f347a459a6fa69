"""Shared in-memory tables for the in-memory repositories.

All in-memory repositories of one container read and write the same
InMemoryDatabase, so cascades and transactions span every table the way
they do in PostgreSQL.
"""

import asyncio
import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Optional
from uuid import UUID

from forum.domain.model import Answer, Profile, Question, Vote


class StorageError(Exception):
    """A write the in-memory tables reject, like a failed CHECK constraint."""


@dataclass
class InMemoryDatabase:
    """Tables keyed by primary key, plus the transaction lock."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)
    questions: dict[UUID, Question] = field(default_factory=dict)
    answers: dict[UUID, Answer] = field(default_factory=dict)
    votes: dict[UUID, Vote] = field(default_factory=dict)

    # One writer at a time stands in for row locks
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    owner: Optional[asyncio.Task] = None

    # Hook for tests: called before commit, may raise to force a rollback
    before_commit: Optional[Callable[[str], Any]] = None

    def snapshot(self) -> dict[str, dict]:
        return {
            "profiles": copy.copy(self.profiles),
            "questions": copy.copy(self.questions),
            "answers": copy.copy(self.answers),
            "votes": copy.copy(self.votes),
        }

    def restore(self, snapshot: dict[str, dict]) -> None:
        self.profiles = snapshot["profiles"]
        self.questions = snapshot["questions"]
        self.answers = snapshot["answers"]
        self.votes = snapshot["votes"]

    def delete_answer_cascade(self, answer_id: UUID) -> bool:
        """Delete an answer and the votes on it."""
        if self.answers.pop(answer_id, None) is None:
            return False
        self.votes = {k: v for k, v in self.votes.items() if v.answer_id != answer_id}
        return True

    def delete_question_cascade(self, question_id: UUID) -> bool:
        """Delete a question, its answers and every vote on either."""
        if self.questions.pop(question_id, None) is None:
            return False
        answer_ids = [
            a.id for a in self.answers.values() if a.question_id == question_id
        ]
        for answer_id in answer_ids:
            self.delete_answer_cascade(answer_id)
        self.votes = {
            k: v for k, v in self.votes.items() if v.question_id != question_id
        }
        return True
